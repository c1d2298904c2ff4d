import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from heuristic_tic_tac_toe.exception import ContractViolationError, InvalidPositionError
from heuristic_tic_tac_toe.player import Player

logger = logging.getLogger(__name__)

RequestMoveCallback: TypeAlias = Callable[[Player, Sequence[int]], object]


def parse_position(raw: object, open_positions: Sequence[int]) -> int:
    """Turn a raw answer from the input collaborator into an open position.

    Accepts ints and integer literals such as ``"7"`` or ``" 7 "``. Anything else,
    including positions that are already taken, raises InvalidPositionError.
    """
    if isinstance(raw, bool):
        raise InvalidPositionError("Not an integer")
    if isinstance(raw, int):
        position = raw
    elif isinstance(raw, str) and raw.strip().isdecimal():
        position = int(raw.strip())
    else:
        raise InvalidPositionError("Not an integer")

    if position not in open_positions:
        choices = ", ".join(str(p) for p in open_positions)
        msg = f"Position {position} is not available, choose one of: {choices}"
        raise InvalidPositionError(msg)
    return position


class LocalPlayer(Player):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._request_move_cb: RequestMoveCallback | None = None
        self._input_error_cbs: list[Callable[[Exception], None]] = []

    def set_request_move_cb(self, callback: RequestMoveCallback) -> None:
        self._request_move_cb = callback

    def add_input_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._input_error_cbs.append(callback)

    def _choose_position(self, open_positions: Sequence[int]) -> int:
        if self._request_move_cb is None:
            msg = f"No input source attached to player {self.name}."
            raise ContractViolationError(msg)

        while True:
            raw = self._request_move_cb(self, open_positions)
            try:
                return parse_position(raw, open_positions)
            except InvalidPositionError as e:
                logger.debug("Rejected input %r from %s: %s", raw, self.name, e)
                self._notify_input_error(e)

    def _notify_input_error(self, exception: Exception) -> None:
        for callback in list(self._input_error_cbs):
            try:
                callback(exception)
            except Exception:
                logger.exception("Input error observer %r failed", callback)
