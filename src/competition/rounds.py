"""
Round naming for knockout brackets.
"""
import math
from typing import List, Optional


FINAL = "Final"
SEMIFINAL = "Semifinal"
QUARTERFINAL = "Quarterfinal"
ROUND_OF_16 = "Round of 16"
ROUND_OF_32 = "Round of 32"
PRELIMINARY_ROUND = "Preliminary round"
THIRD_PLACE = "Third place"


def get_round_name(matches_in_round: int, round_number: int) -> str:
    """Get the generic name of a round based on how many matches it holds."""
    if matches_in_round == 1:
        return FINAL
    elif matches_in_round == 2:
        return SEMIFINAL
    elif matches_in_round == 4:
        return QUARTERFINAL
    else:
        return f"Round {round_number}"


def get_round_names(team_count: int, has_preliminary: bool, total_rounds: Optional[int] = None) -> List[str]:
    """
    Get the round names for a bracket of team_count entrants.

    Names follow the real field size rather than the round index: with 10
    teams the first round only reduces the field to 8, so it is a
    preliminary round and the next one is the quarterfinal.

    Up to 32 teams have explicit tables. Bigger brackets fall back to
    get_round_name for every round.
    """
    if team_count <= 2:
        return [FINAL]
    elif team_count <= 4:
        return [SEMIFINAL, FINAL]
    elif team_count <= 8:
        return [QUARTERFINAL, SEMIFINAL, FINAL]
    elif team_count <= 16:
        if has_preliminary:
            return [PRELIMINARY_ROUND, QUARTERFINAL, SEMIFINAL, FINAL]
        return [ROUND_OF_16, QUARTERFINAL, SEMIFINAL, FINAL]
    elif team_count <= 32:
        if has_preliminary:
            return [PRELIMINARY_ROUND, ROUND_OF_16, QUARTERFINAL, SEMIFINAL, FINAL]
        return [ROUND_OF_32, ROUND_OF_16, QUARTERFINAL, SEMIFINAL, FINAL]

    if total_rounds is None:
        total_rounds = math.ceil(math.log2(team_count))

    names = []
    for round_number in range(1, total_rounds + 1):
        matches_in_round = 2 ** (total_rounds - round_number)
        names.append(get_round_name(matches_in_round, round_number))
    return names
