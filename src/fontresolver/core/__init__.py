"""Core resolution logic for fontresolver.

This module contains:

- Name heuristics (candidate filtering, bold/italic/style disambiguation)
- The FontMatcher service that resolves requests and serves font bytes

Key functions:
- filter_candidates: Select files whose normalized name contains the family
- select_face: Apply the prioritized disambiguation rules
- applicable_rule: Determine which rule a request is judged by

Key classes:
- FontMatcher: Caching resolver over a FontFileIndex
"""

from fontresolver.core.heuristics import (
    MatchRule,
    applicable_rule,
    filter_candidates,
    matches_rule,
    select_face,
)
from fontresolver.core.matcher import FontMatcher

__all__ = [
    "FontMatcher",
    "MatchRule",
    "applicable_rule",
    "filter_candidates",
    "matches_rule",
    "select_face",
]
