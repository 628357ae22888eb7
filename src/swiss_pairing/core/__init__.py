"""Core configuration and errors for Swiss pairing."""

from swiss_pairing.core.config import (
    BYE_TEAM,
    OUTPUT_FORMATS,
    PAIRING_ORDERS,
    PairingOptions,
    ResolvedOptions,
    Team,
    create_squad_map,
    parse_options,
    resolve_options,
)
from swiss_pairing.core.errors import (
    ConfigurationError,
    ErrorMessage,
    InputParseError,
    InvalidOptionError,
    MissingTeamsError,
    UnsupportedFileTypeError,
)

__all__ = [
    "BYE_TEAM",
    "OUTPUT_FORMATS",
    "PAIRING_ORDERS",
    "PairingOptions",
    "ResolvedOptions",
    "Team",
    "create_squad_map",
    "parse_options",
    "resolve_options",
    "ConfigurationError",
    "ErrorMessage",
    "InputParseError",
    "InvalidOptionError",
    "MissingTeamsError",
    "UnsupportedFileTypeError",
]
