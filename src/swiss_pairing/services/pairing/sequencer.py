"""Multi-round schedule generation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from swiss_pairing.core.errors import ErrorMessage
from swiss_pairing.models import ErrorType, Round, ScheduleResult
from swiss_pairing.services.pairing.history import HistoryMap
from swiss_pairing.services.pairing.matcher import match_single_round

logger = structlog.get_logger()


def generate_rounds(
    teams: Sequence[str],
    num_rounds: int,
    start_round: int,
    history: HistoryMap,
    squads: Mapping[str, str | None] | None = None,
) -> ScheduleResult:
    """Generate consecutive rounds, feeding each round into the next one's history.

    The caller's history is never modified. Generation stops at the first
    round that cannot be paired and no partial schedule is returned.

    Args:
        teams: Roster in pairing order, already padded with BYE if needed.
        num_rounds: Number of rounds to generate.
        start_round: Number given to the first generated round.
        history: Matches played before the first generated round.
        squads: Optional team to squad mapping.

    Returns:
        Success with the generated rounds, or a ``no_valid_solution`` failure
        naming the round that could not be paired.
    """
    squads = squads or {}
    working_history = history.clone()
    rounds: list[Round] = []

    for offset in range(num_rounds):
        number = start_round + offset
        label = f"Round {number}"

        matches = match_single_round(teams, working_history, squads)
        if matches is None:
            logger.warning("no_valid_pairings", round=label, teams=len(teams))
            return ScheduleResult.fail(
                ErrorType.NO_VALID_SOLUTION,
                ErrorMessage.NO_VALID_PAIRINGS.format(round=label),
            )

        logger.debug("round_paired", round=label, matches=len(matches))
        rounds.append(Round.create(number, matches))
        working_history = working_history.merge(matches)

    return ScheduleResult.ok(rounds)
