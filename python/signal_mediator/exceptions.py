"""Exceptions raised by the signal mediator."""


class MediatorError(Exception):
    """Base class for all mediator errors."""

    pass


class MissingContextError(MediatorError):
    """Raised when a signal is emitted without a context."""

    pass


class InvalidDefinitionError(MediatorError, TypeError):
    """Raised when a handler definition matches none of the recognized shapes."""

    def __init__(self, definition: object, reason: str = "") -> None:
        self.definition = definition
        message = (
            f"Invalid handler definition {definition!r} (must be a string, "
            "a (name, function) pair, a mapping with 'name' and 'args', or a function)"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnregisteredDirectorError(MediatorError, LookupError):
    """Raised in strict dispatch mode when no director handles a signal."""

    def __init__(self, handler_name: str, director_count: int) -> None:
        self.handler_name = handler_name
        self.director_count = director_count
        if director_count == 0:
            message = f"No director registered to handle '{handler_name}'"
        else:
            message = (
                f"None of the {director_count} registered directors "
                f"has a handler for '{handler_name}'"
            )
        super().__init__(message)


class ConfigurationError(MediatorError):
    """Exception raised for configuration validation errors."""

    pass
