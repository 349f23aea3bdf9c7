# Doubles Rota
# Copyright (C) 2025  Doubles Rota developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
SAVE_FILE_NAME = "doubles-rota.json"
STATE_PATH_ENV_VAR = "DOUBLES_ROTA_STATE"

# Court geometry
PLAYERS_PER_COURT = 4
MAX_COURTS = 5
COURT_CAP_PLAYERS = MAX_COURTS * PLAYERS_PER_COURT
# At most this many sitters beyond the court cap are considered per round
MAX_OVERFLOW_SITTERS = PLAYERS_PER_COURT - 1
CANDIDATE_POOL_CAP = COURT_CAP_PLAYERS + MAX_OVERFLOW_SITTERS

# Gender codes
GENDER_MALE = "M"
GENDER_FEMALE = "F"
GENDER_OTHER = "O"
GENDERS = (GENDER_MALE, GENDER_FEMALE, GENDER_OTHER)
GENDER_NAMES = {
    GENDER_MALE: "Male",
    GENDER_FEMALE: "Female",
    GENDER_OTHER: "Other",
}
GENDER_ALIASES = {
    "m": GENDER_MALE,
    "male": GENDER_MALE,
    "man": GENDER_MALE,
    "f": GENDER_FEMALE,
    "w": GENDER_FEMALE,
    "female": GENDER_FEMALE,
    "woman": GENDER_FEMALE,
    "o": GENDER_OTHER,
    "other": GENDER_OTHER,
}

# Skill range
MIN_SKILL = 1
MAX_SKILL = 10
DEFAULT_SKILL = 5

# Pairing modes (gender composition of courts)
PAIRING_SAME_GENDER = "same-gender"
PAIRING_MIXED = "mixed"
PAIRING_RANDOM = "random"
PAIRING_MODES = (PAIRING_SAME_GENDER, PAIRING_MIXED, PAIRING_RANDOM)
DEFAULT_PAIRING_MODE = PAIRING_RANDOM
PAIRING_MODE_ALIASES = {
    "same": PAIRING_SAME_GENDER,
    "gender": PAIRING_SAME_GENDER,
    "same-gender-priority": PAIRING_SAME_GENDER,
    "mixed-priority": PAIRING_MIXED,
    "mixed-doubles": PAIRING_MIXED,
    "mixed-gender": PAIRING_MIXED,
    "neutral": PAIRING_RANDOM,
    "none": PAIRING_RANDOM,
    "any": PAIRING_RANDOM,
}
PAIRING_MODE_NAMES = {
    PAIRING_SAME_GENDER: "Same gender",
    PAIRING_MIXED: "Mixed doubles",
    PAIRING_RANDOM: "No preference",
}

# Skill modes
SKILL_SAME = "same-skill"
SKILL_BALANCED = "balanced"
SKILL_MODES = (SKILL_SAME, SKILL_BALANCED)
DEFAULT_SKILL_MODE = SKILL_BALANCED
SKILL_MODE_ALIASES = {
    "clustered": SKILL_SAME,
    "similar": SKILL_SAME,
    "same": SKILL_SAME,
    "random": SKILL_BALANCED,
    "spread": SKILL_BALANCED,
    "mixed": SKILL_BALANCED,
}
SKILL_MODE_NAMES = {
    SKILL_SAME: "Similar skill on a court",
    SKILL_BALANCED: "Balanced teams",
}

# Uniqueness importance dial
UNIQUENESS_LOW = 1
UNIQUENESS_MEDIUM = 2
UNIQUENESS_HIGH = 3
DEFAULT_UNIQUENESS_IMPORTANCE = UNIQUENESS_MEDIUM
UNIQUENESS_ALIASES = {
    "low": UNIQUENESS_LOW,
    "medium": UNIQUENESS_MEDIUM,
    "high": UNIQUENESS_HIGH,
}
UNIQUENESS_NAMES = {
    UNIQUENESS_LOW: "Low",
    UNIQUENESS_MEDIUM: "Medium",
    UNIQUENESS_HIGH: "High",
}

# Pool / quartet metric keys
METRIC_PAIRING = "pairing"
METRIC_SKILL = "skill"
METRIC_UNIQUENESS = "uniqueness"

# Tie-break priority of the three metrics per uniqueness importance
PRIORITY_ORDERS = {
    UNIQUENESS_LOW: (METRIC_PAIRING, METRIC_SKILL, METRIC_UNIQUENESS),
    UNIQUENESS_MEDIUM: (METRIC_PAIRING, METRIC_UNIQUENESS, METRIC_SKILL),
    UNIQUENESS_HIGH: (METRIC_UNIQUENESS, METRIC_PAIRING, METRIC_SKILL),
}

# Rotation focus (pair selection within a court)
FOCUS_SKILL_FIRST = "skill-first"
FOCUS_BALANCED = "balanced"
FOCUS_VARIETY = "variety"
ROTATION_FOCI = (FOCUS_SKILL_FIRST, FOCUS_BALANCED, FOCUS_VARIETY)
DEFAULT_ROTATION_FOCUS = FOCUS_SKILL_FIRST
ROTATION_FOCUS_ALIASES = {
    "skill": FOCUS_SKILL_FIRST,
    "variety-weighted": FOCUS_VARIETY,
}
ROTATION_FOCUS_NAMES = {
    FOCUS_SKILL_FIRST: "Skill first",
    FOCUS_BALANCED: "Balanced",
    FOCUS_VARIETY: "Variety",
}
# (skill gap, repeat partners, gender pattern)
ROTATION_FOCUS_WEIGHTS = {
    FOCUS_SKILL_FIRST: (1, 0, 0),
    FOCUS_BALANCED: (1, 2, 3),
    FOCUS_VARIETY: (1, 5, 3),
}

# Sit-out fairness cost
SIT_RATE_WEIGHT = 20
BOOTSTRAP_SIT_WEIGHT = 10
BACK_TO_BACK_SIT_PENALTY = 8
HAPPY_TO_SIT_BONUS = 5
GAME_LAG_THRESHOLD = 2
GAME_LAG_WEIGHT = 3
