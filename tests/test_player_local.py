from collections.abc import Sequence

import pytest

from heuristic_tic_tac_toe.exception import ContractViolationError, InvalidPositionError
from heuristic_tic_tac_toe.player import Player
from heuristic_tic_tac_toe.player_local import LocalPlayer, parse_position


class ScriptedInput:
    """Fake input collaborator that answers from a fixed script."""

    def __init__(self, answers: list[object]) -> None:
        self._answers = list(answers)
        self.requests: list[tuple[str, tuple[int, ...]]] = []

    def __call__(self, player: Player, open_positions: Sequence[int]) -> object:
        self.requests.append((player.name, tuple(open_positions)))
        return self._answers.pop(0)


class TestParsePosition:
    @pytest.mark.parametrize(("raw", "expected"), [("5", 5), (" 7 ", 7), ("3\n", 3), (9, 9)])
    def test_valid(self, raw: object, expected: int) -> None:
        assert parse_position(raw, (3, 5, 7, 9)) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "5.0", "-1", "1 2", 5.0, None, True])
    def test_not_an_integer(self, raw: object) -> None:
        with pytest.raises(InvalidPositionError, match="Not an integer"):
            parse_position(raw, (1, 5))

    @pytest.mark.parametrize("raw", ["2", 0, 10, "42"])
    def test_not_open(self, raw: object) -> None:
        with pytest.raises(InvalidPositionError, match="not available, choose one of: 1, 5"):
            parse_position(raw, (1, 5))


class TestLocalPlayer:
    """Test the human player's retry loop."""

    def test_returns_valid_answer(self) -> None:
        player = LocalPlayer("Alice")
        player.assign_piece("X")
        script = ScriptedInput(["4"])
        player.set_request_move_cb(script)

        assert player.choose_position((2, 3, 4)) == 4
        assert script.requests == [("Alice", (2, 3, 4))]

    def test_retries_until_valid(self) -> None:
        player = LocalPlayer("Alice")
        player.assign_piece("O")
        errors: list[Exception] = []
        player.set_request_move_cb(ScriptedInput(["x", "1", "4"]))
        player.add_input_error_cb(errors.append)

        assert player.choose_position((2, 3, 4)) == 4
        assert len(errors) == 2
        assert all(isinstance(e, InvalidPositionError) for e in errors)
        assert "Not an integer" in str(errors[0])
        assert "Position 1 is not available" in str(errors[1])

    def test_failing_error_observer_does_not_stop_the_retry(self, caplog: pytest.LogCaptureFixture) -> None:
        def _broken(_e: Exception) -> None:
            raise RuntimeError("renderer gone")

        player = LocalPlayer("Alice")
        player.assign_piece("X")
        errors: list[Exception] = []
        script = ScriptedInput(["x", "1"])
        player.set_request_move_cb(script)
        player.add_input_error_cb(_broken)
        player.add_input_error_cb(errors.append)

        assert player.choose_position((1, 2)) == 1
        assert len(script.requests) == 2
        assert len(errors) == 1
        assert "Input error observer" in caplog.text

    def test_requires_input_source(self) -> None:
        player = LocalPlayer("Alice")
        with pytest.raises(ContractViolationError, match="No input source"):
            player.choose_position((1, 2))

    def test_empty_open_positions(self) -> None:
        player = LocalPlayer("Alice")
        script = ScriptedInput([])
        player.set_request_move_cb(script)
        with pytest.raises(ContractViolationError):
            player.choose_position(())
        assert script.requests == []

    def test_collaborator_errors_propagate(self) -> None:
        def _closed(_player: Player, _open_positions: Sequence[int]) -> object:
            raise EOFError

        player = LocalPlayer("Alice")
        player.set_request_move_cb(_closed)
        with pytest.raises(EOFError):
            player.choose_position((1, 2))
