"""Pre- and post-generation checks for Swiss pairing schedules.

The output check rebuilds the played pairs from the generated rounds and
shares no state with the generator.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from swiss_pairing.core.errors import ErrorMessage
from swiss_pairing.models import Round, ValidationResult
from swiss_pairing.services.pairing.history import HistoryMap

logger = structlog.get_logger()


def validate_input(
    teams: Sequence[str],
    num_rounds: int,
    history: HistoryMap,
    squads: Mapping[str, str | None] | None = None,
) -> ValidationResult:
    """Check that a generation request is structurally sound.

    Checks run in a fixed order and the first failure is reported:
    team count, parity, uniqueness, round bounds, history references,
    self-play, history symmetry, squad references.

    Args:
        teams: Roster, already padded with BYE if the raw count was odd.
        num_rounds: Number of rounds requested.
        history: Matches already played.
        squads: Optional team to squad mapping.

    Returns:
        ``ValidationResult.ok()`` or a failure with a specific message.
    """
    result = _check_input(teams, num_rounds, history, squads or {})
    if not result.success:
        logger.info("input_rejected", reason=result.message)
    return result


def _check_input(
    teams: Sequence[str],
    num_rounds: int,
    history: HistoryMap,
    squads: Mapping[str, str | None],
) -> ValidationResult:
    min_teams = 2
    if len(teams) < min_teams:
        return ValidationResult.fail(ErrorMessage.MIN_TEAMS)

    if len(teams) % 2 != 0:
        return ValidationResult.fail(ErrorMessage.EVEN_TEAMS)

    known_teams = set(teams)
    if len(known_teams) != len(teams):
        return ValidationResult.fail(ErrorMessage.UNIQUE_TEAMS)

    if num_rounds < 1:
        return ValidationResult.fail(ErrorMessage.MIN_ROUNDS)

    # A team can meet at most len(teams) - 1 distinct opponents
    if num_rounds >= len(teams):
        return ValidationResult.fail(
            ErrorMessage.MAX_ROUNDS.format(rounds=num_rounds, teams=len(teams))
        )

    for team, opponents in history.items():
        for referenced in (team, *sorted(opponents)):
            if referenced not in known_teams:
                return ValidationResult.fail(
                    ErrorMessage.UNKNOWN_TEAM.format(context="matches", team=referenced)
                )

    for team, opponents in history.items():
        for opponent in sorted(opponents):
            if opponent == team:
                return ValidationResult.fail(ErrorMessage.SELF_PLAY.format(team=team))
            if not history.has_played(opponent, team):
                return ValidationResult.fail(
                    ErrorMessage.ASYMMETRIC_MATCH.format(team1=team, team2=opponent)
                )

    for team in squads:
        if team not in known_teams:
            return ValidationResult.fail(
                ErrorMessage.UNKNOWN_TEAM.format(context="squad assignments", team=team)
            )

    return ValidationResult.ok()


def validate_output(
    rounds: Sequence[Round],
    teams: Sequence[str],
    num_rounds: int,
    start_round: int,
    history: HistoryMap,
    squads: Mapping[str, str | None] | None = None,
) -> ValidationResult:
    """Check a generated schedule against every pairing rule.

    Rounds are scanned in order and matches in list order, accumulating the
    played pairs as they go, so the reported violation is always the first one.

    Args:
        rounds: Generated rounds.
        teams: Roster the rounds were generated for.
        num_rounds: Number of rounds that was requested.
        start_round: Expected number of the first round.
        history: Matches played before the first generated round.
        squads: Optional team to squad mapping.

    Returns:
        ``ValidationResult.ok()`` or a failure describing the first violation.
    """
    result = _check_output(rounds, teams, num_rounds, start_round, history, squads or {})
    if not result.success:
        logger.error("output_rejected", reason=result.message)
    return result


def _check_output(
    rounds: Sequence[Round],
    teams: Sequence[str],
    num_rounds: int,
    start_round: int,
    history: HistoryMap,
    squads: Mapping[str, str | None],
) -> ValidationResult:
    if len(rounds) != num_rounds:
        return ValidationResult.fail(
            ErrorMessage.ROUND_COUNT_MISMATCH.format(actual=len(rounds), expected=num_rounds)
        )

    matches_per_round = len(teams) // 2
    played = history.to_dict()

    for expected_number, round_ in enumerate(rounds, start=start_round):
        if round_.number != expected_number:
            return ValidationResult.fail(
                ErrorMessage.ROUND_NUMBER_SEQUENCE.format(
                    round=round_.label, actual=round_.number, expected=expected_number
                )
            )

        if len(round_.matches) != matches_per_round:
            return ValidationResult.fail(
                ErrorMessage.MATCH_COUNT_MISMATCH.format(
                    round=round_.label,
                    actual=len(round_.matches),
                    expected=matches_per_round,
                )
            )

        seen_this_round: set[str] = set()
        for team1, team2 in round_.matches:
            if team1 == team2:
                return ValidationResult.fail(ErrorMessage.SELF_PLAY.format(team=team1))

            if team2 in played.get(team1, set()):
                return ValidationResult.fail(
                    ErrorMessage.DUPLICATE_MATCH.format(team1=team1, team2=team2)
                )

            if team1 in seen_this_round or team2 in seen_this_round:
                return ValidationResult.fail(
                    ErrorMessage.MULTIPLE_MATCHES.format(
                        team1=team1, team2=team2, round=round_.label
                    )
                )
            seen_this_round.update((team1, team2))

            squad = squads.get(team1)
            if squad and squad == squads.get(team2):
                return ValidationResult.fail(
                    ErrorMessage.SAME_SQUAD.format(team1=team1, team2=team2)
                )

            played.setdefault(team1, set()).add(team2)
            played.setdefault(team2, set()).add(team1)

    return ValidationResult.ok()
