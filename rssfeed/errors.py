"""Exceptions raised while assembling a feed."""

from collections.abc import Iterable


class FeedError(ValueError):
    """Base class for all feed validation errors."""


class UnknownElementError(FeedError):
    """An element name outside the channel or item whitelist was used."""

    def __init__(self, element: str):
        self.element = element
        super().__init__(f"Element '{element}' is not valid!")


class MissingFieldError(FeedError):
    """An item lacks every one of the fields it needs at least one of."""

    def __init__(self, fields: Iterable[str] = ("title", "description")):
        self.fields = tuple(fields)
        names = " or ".join(f"'{f}'" for f in self.fields)
        super().__init__(f"One of {names} has to be set.")


class InvalidDateError(FeedError):
    """A date value could not be parsed into a timestamp."""

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        message = f"Cannot convert {value!r} to a date"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MissingMandatoryPropertyError(FeedError):
    """The channel lacks one or more of title, description and link."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            "Mandatory channel properties not set: " + ", ".join(self.missing)
        )


class FeedStateError(FeedError):
    """An operation was attempted in a state that does not allow it."""

    def __init__(self, state: object, operation: str):
        self.state = state
        self.operation = operation
        super().__init__(f"Cannot {operation} while feed is {state}")
