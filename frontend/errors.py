class RecolheError(Exception):
    """Base class for everything the client raises."""


class ValidationFailed(RecolheError):
    """Missing or mismatched form input."""


class InsufficientBalance(ValidationFailed):
    pass


class Unauthorized(RecolheError):
    pass


class InvalidCredentials(Unauthorized):
    pass


class EmailTaken(ValidationFailed):
    pass


class TransportFailure(RecolheError):
    """The backend could not be reached at all."""


class ServerFault(RecolheError):
    """The backend answered with a 5xx."""

    def __init__(self, message, status_code=500):
        super().__init__(message)
        self.status_code = status_code


# Failures that switch the client to local fallback data
FALLBACK_ERRORS = (TransportFailure, ServerFault)
