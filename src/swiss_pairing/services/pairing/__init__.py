from .history import HistoryMap
from .matcher import match_single_round
from .sequencer import generate_rounds
from .validator import validate_input, validate_output

__all__ = [
    "HistoryMap",
    "generate_rounds",
    "match_single_round",
    "validate_input",
    "validate_output",
]
