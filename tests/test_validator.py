"""Tests for input and output validation."""

from swiss_pairing.models import Round
from swiss_pairing.services.pairing import HistoryMap, validate_input, validate_output

TEAMS = ["a", "b", "c", "d"]


class TestValidateInput:
    """Tests for request validation before generation."""

    def test_valid_input(self):
        """Test a well-formed request passes."""
        history = HistoryMap.from_matches([("a", "b")])
        result = validate_input(TEAMS, 2, history, {"a": "X", "c": "X"})
        assert result.success
        assert result.message is None

    def test_too_few_teams(self):
        """Test a single team is rejected."""
        result = validate_input(["a"], 1, HistoryMap())
        assert not result.success
        assert result.message == "Must have at least 2 teams"

    def test_first_failure_wins(self):
        """Test team count is reported before the round count."""
        result = validate_input(["a"], 0, HistoryMap())
        assert result.message == "Must have at least 2 teams"

    def test_odd_team_count(self):
        """Test odd rosters are rejected."""
        result = validate_input(["a", "b", "c"], 1, HistoryMap())
        assert result.message == "Must have an even number of teams"

    def test_duplicate_teams(self):
        """Test repeated team names are rejected."""
        result = validate_input(["a", "a", "b", "c"], 1, HistoryMap())
        assert result.message == "All team names must be unique"

    def test_zero_rounds(self):
        """Test at least one round is required."""
        result = validate_input(TEAMS, 0, HistoryMap())
        assert result.message == "Must generate at least one round"

    def test_rounds_equal_to_team_count(self):
        """Test the round count must stay below the team count."""
        result = validate_input(TEAMS, 4, HistoryMap())
        assert result.message == "Number of rounds (4) must be less than number of teams (4)"

    def test_max_rounds_allowed(self):
        """Test one fewer round than teams is accepted."""
        assert validate_input(TEAMS, 3, HistoryMap()).success

    def test_unknown_team_in_history(self):
        """Test history naming a team outside the roster is rejected."""
        history = HistoryMap.from_matches([("a", "x")])
        result = validate_input(TEAMS, 1, history)
        assert result.message == 'Unknown team in matches: "x"'

    def test_unknown_opponent_only(self):
        """Test a team that only appears as an opponent is still checked."""
        history = HistoryMap({"a": {"zed"}})
        result = validate_input(TEAMS, 1, history)
        assert result.message == 'Unknown team in matches: "zed"'

    def test_self_play_in_history(self):
        """Test a team recorded as its own opponent is rejected."""
        history = HistoryMap({"a": {"a"}})
        result = validate_input(TEAMS, 1, history)
        assert result.message == 'Team "a" cannot play against itself'

    def test_asymmetric_history(self):
        """Test one-sided history names the offending pair."""
        history = HistoryMap({"a": {"b"}})
        result = validate_input(TEAMS, 1, history)
        assert result.message == (
            "Match history must be symmetrical - found a vs b but not b vs a"
        )

    def test_unknown_team_in_squads(self):
        """Test squad assignments for unknown teams are rejected."""
        result = validate_input(TEAMS, 1, HistoryMap(), {"a": "X", "z": "X"})
        assert result.message == 'Unknown team in squad assignments: "z"'

    def test_history_checked_before_squads(self):
        """Test history errors take precedence over squad errors."""
        history = HistoryMap.from_matches([("a", "x")])
        result = validate_input(TEAMS, 1, history, {"z": "X"})
        assert result.message == 'Unknown team in matches: "x"'


class TestValidateOutput:
    """Tests for the post-generation schedule check."""

    def _round_robin(self) -> list[Round]:
        return [
            Round.create(1, [("a", "b"), ("c", "d")]),
            Round.create(2, [("a", "c"), ("b", "d")]),
            Round.create(3, [("a", "d"), ("b", "c")]),
        ]

    def test_valid_schedule(self):
        """Test a correct round robin passes."""
        result = validate_output(self._round_robin(), TEAMS, 3, 1, HistoryMap())
        assert result.success

    def test_round_count_mismatch(self):
        """Test a missing round is reported."""
        result = validate_output(self._round_robin()[:2], TEAMS, 3, 1, HistoryMap())
        assert result.message == "Generated 2 rounds but expected 3"

    def test_round_number_out_of_sequence(self):
        """Test round numbers must follow the start round."""
        rounds = [Round(label="Round 1", number=2, matches=(("a", "b"), ("c", "d")))]
        result = validate_output(rounds, TEAMS, 1, 1, HistoryMap())
        assert result.message == "Round 1 has incorrect number 2 (should be 1)"

    def test_start_round_offset(self):
        """Test numbering is checked against the start round."""
        rounds = [Round.create(1, [("a", "b"), ("c", "d")])]
        result = validate_output(rounds, TEAMS, 1, 5, HistoryMap())
        assert result.message == "Round 1 has incorrect number 1 (should be 5)"

    def test_match_count_mismatch(self):
        """Test every round must pair the whole roster."""
        rounds = [Round.create(1, [("a", "b")])]
        result = validate_output(rounds, TEAMS, 1, 1, HistoryMap())
        assert result.message == "Round 1 has 1 matches but expected 2"

    def test_self_match(self):
        """Test a team paired with itself is reported."""
        rounds = [Round.create(1, [("a", "a"), ("b", "c")])]
        result = validate_output(rounds, TEAMS, 1, 1, HistoryMap())
        assert result.message == 'Team "a" cannot play against itself'

    def test_repeat_of_prior_history(self):
        """Test a pairing already in the input history is reported."""
        history = HistoryMap.from_matches([("a", "b")])
        rounds = [Round.create(1, [("a", "b"), ("c", "d")])]
        result = validate_output(rounds, TEAMS, 1, 1, history)
        assert result.message == 'Duplicate match found: "a" vs "b"'

    def test_repeat_across_generated_rounds(self):
        """Test a pairing repeated in a later round is reported."""
        rounds = [
            Round.create(1, [("a", "b"), ("c", "d")]),
            Round.create(2, [("b", "a"), ("c", "d")]),
        ]
        result = validate_output(rounds, TEAMS, 2, 1, HistoryMap())
        assert result.message == 'Duplicate match found: "b" vs "a"'

    def test_team_scheduled_twice(self):
        """Test a team appearing in two matches of one round is reported."""
        rounds = [Round.create(1, [("a", "b"), ("a", "c")])]
        result = validate_output(rounds, TEAMS, 1, 1, HistoryMap())
        assert result.message == 'Teams "a" or "c" are scheduled multiple times in Round 1'

    def test_same_squad(self):
        """Test squadmates paired together are reported."""
        rounds = [Round.create(1, [("a", "b"), ("c", "d")])]
        result = validate_output(rounds, TEAMS, 1, 1, HistoryMap(), {"a": "X", "b": "X"})
        assert result.message == (
            'Teams "a" and "b" cannot play each other - they are in the same squad'
        )

    def test_empty_squads_do_not_match(self):
        """Test empty squad names are not treated as a shared squad."""
        rounds = [Round.create(1, [("a", "b"), ("c", "d")])]
        result = validate_output(rounds, TEAMS, 1, 1, HistoryMap(), {"a": "", "b": ""})
        assert result.success

    def test_first_violation_reported(self):
        """Test scanning stops at the earliest violation in match order."""
        history = HistoryMap.from_matches([("c", "d")])
        rounds = [Round.create(1, [("a", "a"), ("c", "d")])]
        result = validate_output(rounds, TEAMS, 1, 1, history)
        assert result.message == 'Team "a" cannot play against itself'

    def test_history_not_modified(self):
        """Test validation works on its own copy of the history."""
        history = HistoryMap.from_matches([("a", "b")])
        rounds = [Round.create(1, [("a", "c"), ("b", "d")])]
        validate_output(rounds, TEAMS, 1, 1, history)
        assert history == HistoryMap.from_matches([("a", "b")])
