"""File-name heuristics for picking a font face.

Matching is deliberately fuzzy: a family matches any file whose normalized
name contains it, and styles are recognized by substrings and short
suffixes ("bd", "bi", "i", ...). A family that happens to be a substring of
an unrelated font name will match that font too.
"""

from collections.abc import Iterable, Sequence
from enum import Enum

from fontresolver.domain import FaceRequest

# (file name, normalized name)
Candidate = tuple[str, str]


class MatchRule(str, Enum):
    """Disambiguation rule, in priority order."""

    BOLD_ITALIC = "bold_italic"
    BOLD = "bold"
    ITALIC = "italic"
    STYLE = "style"
    FIRST = "first"


def applicable_rule(request: FaceRequest) -> MatchRule:
    """Return the highest-priority rule that applies to a request."""
    if request.bold and request.italic:
        return MatchRule.BOLD_ITALIC
    if request.bold:
        return MatchRule.BOLD
    if request.italic:
        return MatchRule.ITALIC
    if request.style:
        return MatchRule.STYLE
    return MatchRule.FIRST


def matches_rule(name: str, rule: MatchRule, style: str | None = None) -> bool:
    """Check a normalized file name against a rule.

    Args:
        name: Normalized file name (see normalize_font_name)
        rule: Rule to apply
        style: Style token, used by MatchRule.STYLE

    Returns:
        True if the name satisfies the rule
    """
    if rule is MatchRule.BOLD_ITALIC:
        return ("bold" in name and "italic" in name) or name.endswith(("bi", "ib"))
    if rule is MatchRule.BOLD:
        return "bold" in name or name.endswith(("b", "bd"))
    if rule is MatchRule.ITALIC:
        return "italic" in name or name.endswith(("i", "ib"))
    if rule is MatchRule.STYLE:
        return bool(style) and style in name
    return False


def filter_candidates(names: Iterable[Candidate], family: str) -> list[Candidate]:
    """Keep the files whose normalized name contains the family, in order."""
    return [candidate for candidate in names if family in candidate[1]]


def select_face(candidates: Sequence[Candidate], request: FaceRequest) -> tuple[str | None, MatchRule]:
    """Pick a face among family candidates.

    The first candidate satisfying the request's rule wins. When none does,
    or the request carries no bold, italic or style hint, the first
    candidate is kept.

    Args:
        candidates: Family candidates in discovery order
        request: Parsed request

    Returns:
        Chosen file name (None if there were no candidates) and the rule
        that decided it
    """
    if not candidates:
        return None, MatchRule.FIRST

    rule = applicable_rule(request)
    if rule is not MatchRule.FIRST:
        for file_name, name in candidates:
            if matches_rule(name, rule, request.style):
                return file_name, rule

    return candidates[0][0], MatchRule.FIRST
