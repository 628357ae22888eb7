"""CLI for Swiss Pairing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import structlog
import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from swiss_pairing import __version__
from swiss_pairing.core.config import (
    OUTPUT_FORMATS,
    PAIRING_ORDERS,
    SEED_ENV_VAR,
    PairingOptions,
    ResolvedOptions,
    parse_options,
    resolve_options,
)
from swiss_pairing.core.errors import ConfigurationError
from swiss_pairing.pipeline import prepare_teams, run_pairing
from swiss_pairing.services.formatting import format_output, format_team_summary
from swiss_pairing.services.input_files import SUPPORTED_FILE_TYPES, load_options
from swiss_pairing.services.pairing import HistoryMap, validate_input

EXAMPLES: list[tuple[str, str]] = [
    (
        "Generate random pairings for 4 teams with squads",
        'swiss-pairing generate -t "Alice [Home]" -t "Bob [Home]" '
        '-t "Charlie [Away]" -t "David [Away]" --order random',
    ),
    (
        "Generate round two for 4 teams, with round one already played",
        "swiss-pairing generate -t Alice -t Bob -t Charlie -t David "
        '--start-round 2 -m "Alice,Bob" -m "Charlie,David"',
    ),
    (
        "Generate pairings from a CSV file",
        "swiss-pairing generate --file example_data/tournament_round1.csv",
    ),
    (
        "Use a JSON file but override the order and output format",
        "swiss-pairing generate --file example_data/tournament_round2.json "
        "--order bottom-up --format json-pretty",
    ),
    (
        "Generate three rounds of random pairings",
        "swiss-pairing generate -t Alice -t Bob -t Charlie -t David -n 3 --order random",
    ),
    (
        "Check an input file without generating",
        "swiss-pairing validate example_data/tournament_round1.csv",
    ),
]

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="swiss-pairing",
    help="Swiss Pairing - Generate Swiss-style tournament pairings",
    add_completion=False,
)
# Schedules go to stdout; diagnostics and logs go to stderr
console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"swiss-pairing v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Swiss Pairing CLI."""
    load_dotenv()


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(1)


def _load_options(
    file: Path | None,
    cli_values: dict[str, object],
    seed: int | None,
) -> ResolvedOptions:
    file_options = load_options(file) if file is not None else None
    cli_options: PairingOptions = parse_options(cli_values, "CLI")
    return resolve_options(cli_options, file_options, seed)


@app.command()
def generate(
    teams: Annotated[
        list[str] | None,
        typer.Option(
            "--teams",
            "-t",
            help='Team from top standing to bottom, optionally with a squad: "Alice [Home]". '
            "Repeat for each team.",
        ),
    ] = None,
    num_rounds: Annotated[
        int | None, typer.Option("--num-rounds", "-n", help="Number of rounds to generate")
    ] = None,
    start_round: Annotated[
        int | None,
        typer.Option("--start-round", "-s", help="Number given to the first generated round"),
    ] = None,
    matches: Annotated[
        list[str] | None,
        typer.Option(
            "--matches",
            "-m",
            help='Pair of teams that already played, e.g. "Alice,Bob". Repeat for each match.',
        ),
    ] = None,
    order: Annotated[
        str | None,
        typer.Option("--order", "-o", help=f"Pairing order: {', '.join(PAIRING_ORDERS)}"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help=f"Input file ({', '.join(SUPPORTED_FILE_TYPES)}). "
            "Command line options override file contents.",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", help=f"Output format: {', '.join(OUTPUT_FORMATS)}"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help=f"Seed for random order (default: ${SEED_ENV_VAR})"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
) -> None:
    """Generate pairings for one or more rounds.

    Args:
        teams: Team strings in standing order.
        num_rounds: Number of rounds to generate.
        start_round: Number of the first generated round.
        matches: Previously played pairs as "A,B".
        order: Pairing order (top-down, bottom-up, random).
        file: Optional CSV, JSON or YAML input file.
        output_format: Output format.
        seed: Random seed for the random order.
        verbose: Enable verbose logging.
    """
    _configure_logging(verbose)

    cli_values = {
        "teams": teams or None,
        "num_rounds": num_rounds,
        "start_round": start_round,
        "matches": matches or None,
        "order": order,
        "format": output_format,
    }

    try:
        options = _load_options(file, cli_values, seed)
        result = run_pairing(options)
    except FileNotFoundError as e:
        raise _fail(str(e)) from e
    except ConfigurationError as e:
        err_console.print(f"[red]{escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1) from e

    if not result.success:
        raise _fail(result.message or "Pairing failed")

    typer.echo(format_output(result.rounds, options.format))


@app.command()
def validate(
    input_path: Annotated[Path, typer.Argument(help="Path to a CSV, JSON or YAML input file")],
) -> None:
    """Validate an input file without generating pairings.

    Args:
        input_path: Path to the input file.
    """
    try:
        options = _load_options(input_path, {}, None)
    except FileNotFoundError as e:
        raise _fail(str(e)) from e
    except ConfigurationError as e:
        err_console.print(f"[red]{escape(str(e))}")
        raise typer.Exit(1) from e

    history = HistoryMap.from_matches(options.matches)
    typer.echo(format_team_summary(options.teams, history))
    typer.echo("")

    roster = prepare_teams(options.team_names, options.order, options.seed)
    result = validate_input(roster, options.num_rounds, history, options.squad_map)
    if not result.success:
        raise _fail(result.message or "Invalid input")

    console.print("[green]Input is valid![/green]")
    console.print(f"  Teams: {len(options.teams)}")
    console.print(f"  Previous matches: {len(options.matches)}")
    console.print(f"  Rounds: {options.num_rounds} starting at {options.start_round}")
    console.print(f"  Order: {options.order}")
    console.print(f"  Format: {options.format}")


@app.command()
def info() -> None:
    """Show tool information and example commands."""
    console.print("[bold]Swiss Pairing[/bold]")
    console.print(f"Version: {__version__}\n")

    console.print("[bold]Example Commands:[/bold]")
    for description, command in EXAMPLES:
        console.print(f"  # {description}")
        console.print(f"  {escape(command)}\n")


if __name__ == "__main__":
    app()
