"""Error messages and configuration exceptions."""

from __future__ import annotations

from enum import StrEnum


class ErrorMessage(StrEnum):
    """Message templates, filled in with ``str.format``."""

    # Files
    FILE_NOT_FOUND = 'File not found: "{path}"'
    INVALID_FILE_TYPE = "Invalid file type: expected one of {types}"
    PARSE_CSV_ERROR = "Invalid CSV: {error}"
    PARSE_JSON_ERROR = "Invalid JSON: {error}"
    PARSE_YAML_ERROR = "Invalid YAML: {error}"
    NO_DATA = "No data found in {source}"

    # Options
    INVALID_ARGUMENT = 'Invalid {origin} argument "{name}": "{value}". Expected {expected}'
    MISSING_TEAMS = "No teams provided"

    # Teams
    MIN_TEAMS = "Must have at least 2 teams"
    EVEN_TEAMS = "Must have an even number of teams"
    UNIQUE_TEAMS = "All team names must be unique"
    UNKNOWN_TEAM = 'Unknown team in {context}: "{team}"'
    SELF_PLAY = 'Team "{team}" cannot play against itself'
    ASYMMETRIC_MATCH = (
        "Match history must be symmetrical - found {team1} vs {team2} but not {team2} vs {team1}"
    )
    SAME_SQUAD = 'Teams "{team1}" and "{team2}" cannot play each other - they are in the same squad'

    # Rounds
    MIN_ROUNDS = "Must generate at least one round"
    MAX_ROUNDS = "Number of rounds ({rounds}) must be less than number of teams ({teams})"
    ROUND_COUNT_MISMATCH = "Generated {actual} rounds but expected {expected}"
    MATCH_COUNT_MISMATCH = "{round} has {actual} matches but expected {expected}"
    DUPLICATE_MATCH = 'Duplicate match found: "{team1}" vs "{team2}"'
    MULTIPLE_MATCHES = 'Teams "{team1}" or "{team2}" are scheduled multiple times in {round}'
    NO_VALID_PAIRINGS = "No valid pairings possible for {round}"
    ROUND_NUMBER_SEQUENCE = "{round} has incorrect number {actual} (should be {expected})"

    # Pipeline
    INVALID_INPUT = "Invalid input: {message}"
    GENERATION_FAILED = "Failed to generate matches: {message}"


class ConfigurationError(Exception):
    """Base exception for option and input file errors with optional suggestions."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[Configuration Error] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class UnsupportedFileTypeError(ConfigurationError):
    """Error when an input file has an unknown extension."""

    def __init__(self, path: str, supported: tuple[str, ...]) -> None:
        super().__init__(
            ErrorMessage.INVALID_FILE_TYPE.format(types=", ".join(supported)),
            f"Rename or convert {path} to a supported format.",
        )


class InputParseError(ConfigurationError):
    """Error when an input file cannot be parsed."""


class InvalidOptionError(ConfigurationError):
    """Error when an option value is out of range or malformed."""

    def __init__(self, origin: str, name: str, value: object, expected: str) -> None:
        super().__init__(
            ErrorMessage.INVALID_ARGUMENT.format(
                origin=origin, name=name, value=value, expected=expected
            )
        )


class MissingTeamsError(ConfigurationError):
    """Error when neither the command line nor a file supplies teams."""

    def __init__(self) -> None:
        super().__init__(
            ErrorMessage.MISSING_TEAMS,
            "Pass --teams or provide a file with a 'teams' entry.",
        )
