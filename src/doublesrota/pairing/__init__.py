from doublesrota.pairing.court_grouper import court_rationale, group_courts
from doublesrota.pairing.history import co_court_counts, pair_key, partner_counts
from doublesrota.pairing.pair_selector import select_pairs
from doublesrota.pairing.sit_out import (
    SitOutDecision,
    cap_candidate_pool,
    select_sit_outs,
)

__all__ = [
    "co_court_counts",
    "partner_counts",
    "pair_key",
    "select_sit_outs",
    "cap_candidate_pool",
    "SitOutDecision",
    "group_courts",
    "court_rationale",
    "select_pairs",
]
