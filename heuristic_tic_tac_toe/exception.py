class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class ContractViolationError(LogicError):
    pass


class InvalidPositionError(GameError):
    pass


class SessionAbortedError(GameError):
    pass
