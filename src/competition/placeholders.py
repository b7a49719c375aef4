"""
Forward references between bracket matches.

A later-round slot that is not yet known points at an earlier match and the
outcome it needs from it. Stored data and downstream resolvers rely on the
text form, so the grammar below must not change:

    "Winner of match {N}"
    "Loser of match {N}"
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Outcome(Enum):
    WINNER = "Winner"
    LOSER = "Loser"


PLACEHOLDER_PATTERN = re.compile(r'^(Winner|Loser) of match (\d+)$')


@dataclass(frozen=True)
class SlotReference:
    match_number: int
    outcome: Outcome = Outcome.WINNER

    def __str__(self):
        return f"{self.outcome.value} of match {self.match_number}"


def winner_of(match_number: int) -> SlotReference:
    return SlotReference(match_number, Outcome.WINNER)


def loser_of(match_number: int) -> SlotReference:
    return SlotReference(match_number, Outcome.LOSER)


def format_placeholder(reference: Optional[SlotReference]) -> Optional[str]:
    if reference is None:
        return None
    return str(reference)


def parse_placeholder(text: Optional[str]) -> Optional[SlotReference]:
    """Parse placeholder text back into a reference, or None if it is not one."""
    if not text:
        return None
    match = PLACEHOLDER_PATTERN.match(text.strip())
    if not match:
        return None
    return SlotReference(int(match.group(2)), Outcome(match.group(1)))
