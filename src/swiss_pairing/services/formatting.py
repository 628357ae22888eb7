"""Rendering generated rounds for output."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence

from tabulate import tabulate

from swiss_pairing.core.config import OutputFormat, Team
from swiss_pairing.models import Round
from swiss_pairing.services.pairing import HistoryMap

CSV_HEADER = ("Round", "Match", "Home Team", "Away Team")


def format_output(rounds: Sequence[Round], fmt: OutputFormat) -> str:
    """Render rounds in the requested output format.

    Args:
        rounds: Generated rounds in order.
        fmt: One of csv, json-plain, json-pretty, text-markdown, text-plain.

    Returns:
        The rendered schedule.
    """
    if fmt == "csv":
        return format_rounds_as_csv(rounds)
    if fmt == "json-plain":
        return json.dumps(_rounds_by_label(rounds))
    if fmt == "json-pretty":
        return json.dumps(_rounds_by_label(rounds), indent=2)
    if fmt == "text-markdown":
        return format_rounds_as_markdown(rounds)
    if fmt == "text-plain":
        return format_rounds_as_text(rounds)
    msg = f"Unsupported output format: {fmt}"
    raise ValueError(msg)


def _rounds_by_label(rounds: Sequence[Round]) -> dict[str, list[list[str]]]:
    return {round_.label: [list(match) for match in round_.matches] for round_ in rounds}


def format_rounds_as_csv(rounds: Sequence[Round]) -> str:
    """One row per match: round number, match number, home team, away team."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for round_ in rounds:
        for index, (home, away) in enumerate(round_.matches, start=1):
            writer.writerow((round_.number, index, home, away))
    return buffer.getvalue().rstrip("\n")


def format_rounds_as_markdown(rounds: Sequence[Round]) -> str:
    """Bold round labels followed by numbered match lists.

    A ``# Matches`` title is added when there is more than one round.
    """
    lines: list[str] = []
    if len(rounds) > 1:
        lines.extend(["# Matches", ""])

    for round_ in rounds:
        lines.extend([f"**{round_.label}**", ""])
        lines.extend(
            f"{index}. {home} vs {away}"
            for index, (home, away) in enumerate(round_.matches, start=1)
        )
        lines.append("")

    return "\n".join(lines).strip()


def format_rounds_as_text(rounds: Sequence[Round]) -> str:
    """Round label line followed by one ``A vs B`` line per match."""
    blocks = []
    for round_ in rounds:
        match_lines = [f"{home} vs {away}" for home, away in round_.matches]
        blocks.append("\n".join([f"{round_.label}:", *match_lines]))
    return "\n".join(blocks)


def format_team_summary(teams: Sequence[Team], history: HistoryMap) -> str:
    """Markdown table of teams, squads and previous opponents."""
    rows = [
        (
            team.name,
            team.squad or "-",
            len(history.opponents(team.name)),
            ", ".join(sorted(history.opponents(team.name))) or "-",
        )
        for team in teams
    ]
    return tabulate(
        rows,
        headers=("Team", "Squad", "Played", "Opponents"),
        tablefmt="github",
    )
