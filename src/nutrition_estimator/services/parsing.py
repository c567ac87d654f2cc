"""Split free-text meal descriptions into food mentions."""

import re

from nutrition_estimator.domain.nutrition import FoodMention

_SEPARATOR_RE = re.compile(r"with|and|&|,|\+")
_QUANTITY_RE = re.compile(r"^(\d+)\s+(\S.*)$", re.DOTALL)


def split_foods(text: str) -> list[FoodMention]:
    """Split a query like "2 dosa with sambar" into ordered food mentions.

    Separators are matched as plain tokens after lower-casing, so they also
    match inside words. A leading run of digits followed by whitespace and a
    name is read as the quantity; a bare number stays part of the name.
    """
    mentions: list[FoodMention] = []
    for segment in _SEPARATOR_RE.split(text.lower()):
        cleaned = segment.strip()
        if not cleaned:
            continue
        mentions.append(_parse_segment(cleaned))
    return mentions


def _parse_segment(segment: str) -> FoodMention:
    match = _QUANTITY_RE.match(segment)
    if match is None:
        return FoodMention(name=segment)
    try:
        quantity = int(match.group(1))
    except ValueError:
        return FoodMention(name=segment)
    if quantity < 1:
        return FoodMention(name=segment)
    return FoodMention(name=match.group(2).strip(), quantity=quantity)
