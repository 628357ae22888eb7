"""Option schemas and merging for Swiss pairing runs."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from swiss_pairing.core.errors import InvalidOptionError, MissingTeamsError

BYE_TEAM = "BYE"
SEED_ENV_VAR = "SWISS_PAIRING_SEED"

PairingOrder = Literal["top-down", "bottom-up", "random"]
OutputFormat = Literal["csv", "json-plain", "json-pretty", "text-markdown", "text-plain"]
InputOrigin = Literal["CLI", "CSV", "JSON", "YAML"]

PAIRING_ORDERS: tuple[str, ...] = get_args(PairingOrder)
OUTPUT_FORMATS: tuple[str, ...] = get_args(OutputFormat)

DEFAULT_NUM_ROUNDS = 1
DEFAULT_START_ROUND = 1
DEFAULT_ORDER: PairingOrder = "top-down"
DEFAULT_FORMAT: OutputFormat = "text-markdown"

# "name" or "name [squad]"
TEAM_STRING_PATTERN = re.compile(r"^([^\[\]]+?)\s*(?:\[\s*([^\[\]]*?)\s*\])?$")
TEAM_EXPECTED = 'valid team name, optionally followed by [squad] e.g. "Alice [Home]"'


def _one_of(options: tuple[str, ...]) -> str:
    return f'one of "{", ".join(options)}"'


class Team(BaseModel):
    """A team and its optional squad. Squadmates never play each other."""

    model_config = ConfigDict(frozen=True)

    name: str
    squad: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Team names cannot be empty")
        return v

    @classmethod
    def parse(cls, value: str) -> Team:
        """Parse ``"Alice"`` or ``"Alice [Home]"``.

        Raises:
            ValueError: If brackets are unbalanced or nested, or the squad is empty.
        """
        match = TEAM_STRING_PATTERN.match(value.strip())
        if not match or match.group(2) == "":
            raise ValueError(TEAM_EXPECTED)
        return cls(name=match.group(1).strip(), squad=match.group(2))

    def __str__(self) -> str:
        if self.squad and self.squad.strip():
            return f"{self.name} [{self.squad}]"
        return self.name


class PairingOptions(BaseModel):
    """Options from a single source (command line or input file).

    Every field is optional so that sources can be layered; see
    :func:`resolve_options`.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    teams: list[Team] | None = None
    num_rounds: int | None = Field(default=None, alias="num-rounds")
    start_round: int | None = Field(default=None, alias="start-round")
    order: PairingOrder | None = None
    format: OutputFormat | None = None
    matches: list[tuple[str, str]] | None = None

    @field_validator("teams", mode="before")
    @classmethod
    def validate_teams(cls, v: Any) -> list[Team] | None:
        if v is None:
            return None
        if isinstance(v, str):
            v = [v]
        min_teams = 2
        if not isinstance(v, list | tuple) or len(v) < min_teams:
            raise ValueError("at least two teams")
        teams = [_to_team(t) for t in v]
        if len({t.name for t in teams}) != len(teams):
            raise ValueError("unique team names")
        return teams

    @field_validator("num_rounds", "start_round", mode="before")
    @classmethod
    def validate_positive_integer(cls, v: Any) -> int | None:
        if v is None or v == "":
            return None
        if isinstance(v, bool):
            raise ValueError("a positive integer")
        try:
            value = int(str(v).strip())
        except ValueError:
            raise ValueError("a positive integer") from None
        if value < 1:
            raise ValueError("a positive integer")
        return value

    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        value = str(v).strip().lower()
        if value not in PAIRING_ORDERS:
            raise ValueError(_one_of(PAIRING_ORDERS))
        return value

    @field_validator("format", mode="before")
    @classmethod
    def validate_format(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        value = str(v).strip().lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(_one_of(OUTPUT_FORMATS))
        return value

    @field_validator("matches", mode="before")
    @classmethod
    def validate_matches(cls, v: Any) -> list[tuple[str, str]] | None:
        if v is None:
            return None
        pair_size = 2
        expected = 'pairs of team names e.g. "Alice,Bob"'
        if not isinstance(v, list | tuple):
            raise ValueError(expected)
        matches = []
        for entry in v:
            if isinstance(entry, str):
                pair = entry.split(",")
            elif isinstance(entry, list | tuple):
                pair = list(entry)
            else:
                raise ValueError(expected)
            names = [str(name).strip() for name in pair]
            if len(names) != pair_size or not all(names):
                raise ValueError(expected)
            matches.append((names[0], names[1]))
        return matches



def _to_team(value: Any) -> Team:
    if isinstance(value, Team):
        return value
    if isinstance(value, str):
        return Team.parse(value)
    if isinstance(value, Mapping):
        try:
            return Team.model_validate(value)
        except ValidationError:
            raise ValueError(TEAM_EXPECTED) from None
    raise ValueError(TEAM_EXPECTED)

class ResolvedOptions(BaseModel):
    """Fully populated options after merging all sources with defaults."""

    teams: list[Team] = Field(..., min_length=1)
    num_rounds: int = DEFAULT_NUM_ROUNDS
    start_round: int = DEFAULT_START_ROUND
    order: PairingOrder = DEFAULT_ORDER
    format: OutputFormat = DEFAULT_FORMAT
    matches: list[tuple[str, str]] = Field(default_factory=list)
    seed: int | None = None

    @property
    def team_names(self) -> list[str]:
        return [team.name for team in self.teams]

    @property
    def squad_map(self) -> dict[str, str]:
        return create_squad_map(self.teams)


def parse_options(data: Mapping[str, Any], origin: InputOrigin) -> PairingOptions:
    """Validate raw option values from one source.

    Args:
        data: Option values keyed by field name or hyphenated alias.
        origin: Where the values came from, used in error messages.

    Returns:
        Validated options.

    Raises:
        InvalidOptionError: On the first invalid value.
    """
    try:
        return PairingOptions.model_validate(dict(data))
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "options"
        value = error.get("input")
        if isinstance(value, list | tuple):
            value = ",".join(str(item) for item in value)
        expected = str(error["msg"]).removeprefix("Value error, ")
        raise InvalidOptionError(origin, field.replace("_", "-"), value, expected) from e


def resolve_options(
    cli_options: PairingOptions,
    file_options: PairingOptions | None = None,
    seed: int | None = None,
) -> ResolvedOptions:
    """Merge option sources. Precedence: command line, then file, then defaults.

    Raises:
        MissingTeamsError: If no source provides teams.
    """
    merged: dict[str, Any] = {}
    if file_options is not None:
        merged.update(file_options.model_dump(exclude_none=True))
    merged.update(cli_options.model_dump(exclude_none=True))

    if not merged.get("teams"):
        raise MissingTeamsError

    merged["seed"] = resolve_seed(seed)
    return ResolvedOptions.model_validate(merged)


def resolve_seed(seed: int | None = None) -> int | None:
    """Use an explicit seed, else ``SWISS_PAIRING_SEED`` from the environment."""
    if seed is not None:
        return seed
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidOptionError("environment", SEED_ENV_VAR, raw, "an integer") from None


def create_squad_map(teams: list[Team]) -> dict[str, str]:
    """Map team names to squads, leaving out teams without one."""
    return {team.name: team.squad for team in teams if team.squad}
