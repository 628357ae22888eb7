"""Backtracking search for a single round of pairings."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from swiss_pairing.models import Match
from swiss_pairing.services.pairing.history import HistoryMap


def match_single_round(
    teams: Sequence[str],
    history: HistoryMap,
    squads: Mapping[str, str | None] | None = None,
) -> list[Match] | None:
    """Pair every team for one round using recursive backtracking.

    The first team in the list is tried against each remaining team in list
    order. A candidate is skipped if the two teams have already played or
    share a squad. On the first candidate for which the rest of the list can
    also be paired, the search stops, so the result is the first valid
    pairing in list order rather than a best one.

    Args:
        teams: Teams to pair, in priority order. Must have even length.
        history: Opponents each team has already faced.
        squads: Optional team to squad mapping. Teams sharing a non-empty
            squad are never paired.

    Returns:
        Matches covering every team exactly once, or None if no pairing
        exists for this order and these constraints.
    """
    if not teams:
        return []

    squads = squads or {}
    current, *remaining = teams
    current_squad = squads.get(current)

    for index, opponent in enumerate(remaining):
        if history.has_played(current, opponent):
            continue
        if current_squad and current_squad == squads.get(opponent):
            continue

        rest = remaining[:index] + remaining[index + 1 :]
        matches = match_single_round(rest, history, squads)
        if matches is not None:
            return [(current, opponent), *matches]

    return None
