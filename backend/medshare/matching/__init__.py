"""Matching module for MedShare.

Pairs Available surplus postings with Open requests for the same medicine
and ranks the pairs by a weighted score:
- Urgency of the request (40%)
- Days until the surplus batch expires (30%)
- Share of the requested quantity the surplus covers (30%)
"""

from .ports import MatcherPort, Match, ScoreBreakdown
from .scorer import MatchScorer, round_half_up
from .matcher import RuleBasedMatcher, find_matches, filter_for_clinic

__all__ = [
    "MatcherPort",
    "Match",
    "ScoreBreakdown",
    "MatchScorer",
    "round_half_up",
    "RuleBasedMatcher",
    "find_matches",
    "filter_for_clinic",
]
