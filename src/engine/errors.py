"""Error types raised by the projection and ledger engines.

All subclass ValueError so callers that already handle bad input keep working.
"""


class InvalidConfig(ValueError):
    """Scenario inputs that cannot be simulated."""


class NoDataFound(ValueError):
    """Ledger text contained no record lines."""


class ParseError(ValueError):
    """A record line matched but could not be converted into a ledger row."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
