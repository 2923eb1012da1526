"""Exception hierarchy for the menu engine.

ValidationError and NoCandidateError propagate to the caller. The remote
strategy errors are returned inside a RemoteResult and absorbed by the local
fallback; they are only raised inside the transport code.
"""


class KondateError(Exception):
    """Base class for every error raised by the engine."""


class ValidationError(KondateError):
    """Malformed generation input (date range, household size, distribution)."""


class NoCandidateError(KondateError):
    """No catalog entry satisfies the constraints for a required slot."""

    def __init__(self, message: str, *, scheduled_date=None, cuisine=None):
        super().__init__(message)
        self.scheduled_date = scheduled_date
        self.cuisine = cuisine


class RemoteStrategyError(KondateError):
    """Any failure of the external menu generator."""


class RemoteUnavailable(RemoteStrategyError):
    """Not configured, unreachable, or answered with a non-success status."""


class RemoteTimeout(RemoteStrategyError):
    """The remote call exceeded its time budget and was cancelled."""


class ResponseParseError(RemoteStrategyError):
    """The remote answer was not valid JSON or did not match the schema."""


__all__ = [
    'KondateError', 'ValidationError', 'NoCandidateError', 'RemoteStrategyError',
    'RemoteUnavailable', 'RemoteTimeout', 'ResponseParseError',
]
