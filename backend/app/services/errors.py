"""Domain exceptions for readiness scoring and match formation."""


class MatchFormationError(Exception):
    """Base class for errors raised by the scoring and matching services."""
    pass


class QuizValidationError(MatchFormationError):
    """Raised when quiz answers reference an unknown question or an invalid response."""
    pass


class SwipeError(MatchFormationError):
    """Raised when a swipe cannot be processed. Safe to retry."""
    pass


class LedgerError(SwipeError):
    """Raised when a like cannot be recorded or read for a reason other than a duplicate."""
    pass


class RegistryError(SwipeError):
    """Raised when a match cannot be looked up or created for a reason other than a conflict."""
    pass
