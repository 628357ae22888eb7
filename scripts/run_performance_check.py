#!/usr/bin/env python
"""Time schedule generation across tournament sizes."""

import time
import tracemalloc

from rich.console import Console
from tabulate import tabulate

from swiss_pairing.pipeline import generate_schedule

# (teams, rounds) from a small club night up to a stress test
TEST_CASES = [
    (8, 3),
    (16, 3),
    (16, 5),
    (32, 5),
    (64, 5),
    (100, 9),
    (1000, 9),
]
ITERATIONS = 3

console = Console()


def run_case(team_count: int, round_count: int) -> tuple[float, float]:
    """Return average seconds per run and peak memory in MB."""
    teams = [f"Team{i + 1}" for i in range(team_count)]
    timings = []

    tracemalloc.start()
    for _ in range(ITERATIONS):
        start = time.perf_counter()
        result = generate_schedule(teams, round_count, start_round=1)
        timings.append(time.perf_counter() - start)
        if not result.success:
            raise RuntimeError(result.message)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    return sum(timings) / len(timings), peak / 1024 / 1024


def main() -> None:
    """Run every test case and print a summary table."""
    rows = []
    for team_count, round_count in TEST_CASES:
        console.print(f"Running {team_count} teams, {round_count} rounds...")
        avg_seconds, peak_mb = run_case(team_count, round_count)
        rows.append((team_count, round_count, f"{avg_seconds * 1000:.2f}", f"{peak_mb:.2f}"))

    console.print()
    console.print(
        tabulate(rows, headers=("Teams", "Rounds", "Avg ms", "Peak MB"), tablefmt="github")
    )


if __name__ == "__main__":
    main()
