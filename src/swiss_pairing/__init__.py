"""Swiss Pairing.

Generate Swiss-style tournament pairings that avoid rematches and
intra-squad games.
"""

from swiss_pairing.pipeline import generate_schedule, prepare_teams, run_pairing

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "generate_schedule",
    "prepare_teams",
    "run_pairing",
]
