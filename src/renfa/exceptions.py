"""Custom exceptions for renfa."""


class RenfaError(Exception):
    """Base exception for all renfa errors."""

    pass


class InvalidArgumentError(RenfaError):
    """Raised when a required argument is missing."""

    pass


class StateError(RenfaError):
    """Raised when an operation is invalid for a particular state."""

    def __init__(self, message: str, state: object = None) -> None:
        self.state = state
        super().__init__(message)

    def __str__(self) -> str:
        if self.state is not None:
            return f"{super().__str__()}: {self.state!r}"
        return super().__str__()


class DuplicateStateError(StateError):
    """Raised when a state is added to an automaton that already has it."""

    pass


class UnknownStateError(StateError):
    """Raised when an operation references a state the automaton does not have."""

    pass
