"""Pipeline orchestration for Swiss pairing generation."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping, Sequence

import structlog

from swiss_pairing.core.config import BYE_TEAM, PairingOrder, ResolvedOptions
from swiss_pairing.core.errors import ErrorMessage
from swiss_pairing.models import ErrorType, Match, ScheduleResult
from swiss_pairing.services.pairing import (
    HistoryMap,
    generate_rounds,
    validate_input,
    validate_output,
)

logger = structlog.get_logger()


def add_bye_if_necessary(teams: Sequence[str]) -> list[str]:
    """Append the BYE team when the team count is odd."""
    return [*teams, BYE_TEAM] if len(teams) % 2 == 1 else list(teams)


def prepare_teams(
    teams: Sequence[str],
    order: PairingOrder,
    seed: int | None = None,
) -> list[str]:
    """Pad with BYE if needed, then arrange teams in pairing order.

    Args:
        teams: Team names from top standing to bottom.
        order: "top-down" keeps the order, "bottom-up" reverses it and
            "random" shuffles it.
        seed: Random seed for reproducible shuffling.

    Returns:
        The roster handed to the pairing engine.
    """
    roster = add_bye_if_necessary(teams)
    if order == "bottom-up":
        return roster[::-1]
    if order == "random":
        rng = random.Random(seed)  # noqa: S311
        rng.shuffle(roster)
    return roster


def generate_schedule(
    teams: Sequence[str],
    num_rounds: int,
    start_round: int,
    matches: Iterable[Match] = (),
    squads: Mapping[str, str | None] | None = None,
) -> ScheduleResult:
    """Validate the request, generate rounds and check the result.

    Teams must already be in pairing order and padded with BYE if needed.

    Args:
        teams: Roster in pairing order.
        num_rounds: Number of rounds to generate.
        start_round: Number of the first generated round.
        matches: Pairs that have already played.
        squads: Optional team to squad mapping.

    Returns:
        The generated rounds, or an ``invalid_input``, ``no_valid_solution``
        or ``invalid_output`` failure.
    """
    squads = squads or {}
    history = HistoryMap.from_matches(matches)

    input_result = validate_input(teams, num_rounds, history, squads)
    if not input_result.success:
        return ScheduleResult.fail(
            ErrorType.INVALID_INPUT,
            ErrorMessage.INVALID_INPUT.format(message=input_result.message),
        )

    rounds_result = generate_rounds(teams, num_rounds, start_round, history, squads)
    if not rounds_result.success:
        return ScheduleResult.fail(
            ErrorType.NO_VALID_SOLUTION,
            ErrorMessage.GENERATION_FAILED.format(message=rounds_result.message),
        )

    output_result = validate_output(
        rounds_result.rounds, teams, num_rounds, start_round, history, squads
    )
    if not output_result.success:
        return ScheduleResult.fail(
            ErrorType.INVALID_OUTPUT,
            ErrorMessage.GENERATION_FAILED.format(message=output_result.message),
        )

    logger.info(
        "schedule_generated",
        teams=len(teams),
        rounds=num_rounds,
        start_round=start_round,
    )
    return rounds_result


def run_pairing(options: ResolvedOptions) -> ScheduleResult:
    """Prepare the roster from resolved options and generate the schedule."""
    roster = prepare_teams(options.team_names, options.order, options.seed)
    logger.debug("roster_prepared", order=options.order, roster=roster)
    return generate_schedule(
        teams=roster,
        num_rounds=options.num_rounds,
        start_round=options.start_round,
        matches=options.matches,
        squads=options.squad_map,
    )
