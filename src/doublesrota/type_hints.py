"""Type hints used in Doubles Rota."""

from typing import Dict, FrozenSet, Literal, Tuple

# Gender codes
Gender = Literal["M", "F", "O"]

PairingMode = Literal["same-gender", "mixed", "random"]
SkillMode = Literal["same-skill", "balanced"]
UniquenessImportance = Literal[1, 2, 3]
RotationFocus = Literal["skill-first", "balanced", "variety"]

# Unordered pair of player ids
PairKey = FrozenSet[int]
# Mapping of unordered pair -> number of occurrences
PairCounts = Dict[PairKey, int]
# Two player ids playing on the same side
Pair = Tuple[int, int]
# One 2-2 split of a court
PairSplit = Tuple[Pair, Pair]
# Metric values ordered by priority
MetricTuple = Tuple[float, float, float]


#  LocalWords:  PairSplit PairKey
