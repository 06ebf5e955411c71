"""Custom exception hierarchy for ledger-replay."""


class LedgerReplayError(Exception):
    """Base exception for all ledger-replay errors."""


class InputFormatError(LedgerReplayError):
    """Raised when an input record cannot become a valid transaction.

    Parameters
    ----------
    message : str
        Human readable description.
    line : int | None
        Line number of the offending record in its source, if known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"line {self.line}: {message}"


class MalformedRecordError(InputFormatError):
    """Raised when a record's syntax or field values are invalid."""


class MissingAmountError(InputFormatError):
    """Raised when a deposit or withdrawal has no amount."""


class NegativeAmountError(InputFormatError):
    """Raised when a deposit or withdrawal has a negative amount."""


class ConfigurationError(LedgerReplayError):
    """Raised when configuration is invalid or missing."""


class SinkError(LedgerReplayError):
    """Raised when a sink operation fails."""
