"""Symmetric record of which teams have already met."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from swiss_pairing.models import Match


class HistoryMap:
    """Map from a team to the set of opponents it has already faced.

    Instances built with :meth:`from_matches` or :meth:`merge` are symmetric.
    The plain constructor keeps the supplied mapping as-is, including self-play
    and one-sided entries, which input validation rejects.
    """

    def __init__(self, opponents: Mapping[str, Iterable[str]] | None = None) -> None:
        self._opponents: dict[str, set[str]] = {
            team: set(played) for team, played in (opponents or {}).items()
        }

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> HistoryMap:
        """Build a symmetric history from a list of played pairs."""
        history = cls()
        for team1, team2 in matches:
            history.add_match(team1, team2)
        return history

    def clone(self) -> HistoryMap:
        """Copy keys and opponent sets so the copy can be mutated freely."""
        return HistoryMap(self._opponents)

    def merge(self, matches: Iterable[Match]) -> HistoryMap:
        """Return a clone with every match added in both directions."""
        merged = self.clone()
        for team1, team2 in matches:
            merged.add_match(team1, team2)
        return merged

    def add_match(self, team1: str, team2: str) -> None:
        """Record a match in both directions, in place."""
        self._opponents.setdefault(team1, set()).add(team2)
        self._opponents.setdefault(team2, set()).add(team1)

    def has_played(self, team1: str, team2: str) -> bool:
        return team2 in self._opponents.get(team1, ())

    def opponents(self, team: str) -> frozenset[str]:
        return frozenset(self._opponents.get(team, ()))

    def teams(self) -> set[str]:
        """Every team mentioned, either as a key or as an opponent."""
        mentioned = set(self._opponents)
        for played in self._opponents.values():
            mentioned.update(played)
        return mentioned

    def items(self) -> Iterator[tuple[str, frozenset[str]]]:
        for team, played in self._opponents.items():
            yield team, frozenset(played)

    def to_dict(self) -> dict[str, set[str]]:
        return {team: set(played) for team, played in self._opponents.items()}

    def __iter__(self) -> Iterator[str]:
        return iter(self._opponents)

    def __contains__(self, team: object) -> bool:
        return team in self._opponents

    def __len__(self) -> int:
        return len(self._opponents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistoryMap):
            return NotImplemented
        return self._opponents == other._opponents

    def __repr__(self) -> str:
        return f"HistoryMap({self._opponents!r})"
