"""Loading pairing options from CSV, JSON and YAML files."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any

import structlog
import yaml

from swiss_pairing.core.config import PairingOptions, parse_options
from swiss_pairing.core.errors import (
    ErrorMessage,
    InputParseError,
    UnsupportedFileTypeError,
)

logger = structlog.get_logger()

SUPPORTED_FILE_TYPES = (".csv", ".json", ".yaml", ".yml")

CSV_TEAM = "teams"
CSV_SQUAD = "squads"
CSV_MATCH_HOME = "matches-home"
CSV_MATCH_AWAY = "matches-away"
# Tournament-wide settings, read from the first row only
CSV_SETTINGS = ("num-rounds", "start-round", "order", "format")


def load_options(path: str | Path) -> PairingOptions:
    """Load options from an input file, choosing the parser by extension.

    Args:
        path: Path to a .csv, .json, .yaml or .yml file.

    Returns:
        Validated options. Fields the file does not set are None.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFileTypeError: If the extension is not supported.
        InputParseError: If the file is malformed or empty.
        InvalidOptionError: If a value in the file is invalid.
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_FILE_TYPES:
        raise UnsupportedFileTypeError(str(file_path), SUPPORTED_FILE_TYPES)

    if not file_path.exists():
        msg = ErrorMessage.FILE_NOT_FOUND.format(path=file_path)
        raise FileNotFoundError(msg)

    content = file_path.read_text(encoding="utf-8")
    logger.debug("loading_input_file", path=str(file_path), type=suffix)

    if suffix == ".csv":
        return parse_csv_options(content)
    if suffix == ".json":
        return parse_json_options(content)
    return parse_yaml_options(content)


def parse_csv_options(content: str) -> PairingOptions:
    """Parse options from CSV content.

    Headers are case-insensitive. Each row may add a team (``teams`` plus an
    optional ``squads`` column) and a played match (``matches-home`` and
    ``matches-away``). Settings are only read from the first row.
    """
    try:
        reader = csv.DictReader(io.StringIO(content))
        if reader.fieldnames is not None:
            reader.fieldnames = [name.strip().lower() for name in reader.fieldnames]
        rows = [_clean_row(row) for row in reader]
    except csv.Error as e:
        raise InputParseError(ErrorMessage.PARSE_CSV_ERROR.format(error=e)) from e

    rows = [row for row in rows if any(row.values())]
    if not rows:
        raise InputParseError(ErrorMessage.NO_DATA.format(source="CSV"))

    teams = [
        {"name": row[CSV_TEAM], "squad": row.get(CSV_SQUAD) or None}
        for row in rows
        if row.get(CSV_TEAM)
    ]
    matches = [
        (row[CSV_MATCH_HOME], row[CSV_MATCH_AWAY])
        for row in rows
        if row.get(CSV_MATCH_HOME) and row.get(CSV_MATCH_AWAY)
    ]

    data: dict[str, Any] = {key: rows[0].get(key) or None for key in CSV_SETTINGS}
    data["teams"] = teams or None
    data["matches"] = matches or None
    return parse_options(data, "CSV")


def parse_json_options(content: str) -> PairingOptions:
    """Parse options from a JSON object.

    Teams may be given as ``"Alice [Home]"`` strings or as
    ``{"name": "Alice", "squad": "Home"}`` objects, mixed freely.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise InputParseError(ErrorMessage.PARSE_JSON_ERROR.format(error=e)) from e

    if not isinstance(data, dict):
        raise InputParseError(ErrorMessage.PARSE_JSON_ERROR.format(error="must be an object"))
    return parse_options(data, "JSON")


def parse_yaml_options(content: str) -> PairingOptions:
    """Parse options from a YAML mapping with the same keys as the JSON format."""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise InputParseError(ErrorMessage.PARSE_YAML_ERROR.format(error=e)) from e

    if data is None:
        raise InputParseError(ErrorMessage.NO_DATA.format(source="YAML"))
    if not isinstance(data, dict):
        raise InputParseError(ErrorMessage.PARSE_YAML_ERROR.format(error="must be a mapping"))
    return parse_options(data, "YAML")


def _clean_row(row: dict[str | None, Any]) -> dict[str, str]:
    # Extra cells land under the None key
    return {
        key: value.strip()
        for key, value in row.items()
        if key is not None and isinstance(value, str)
    }
