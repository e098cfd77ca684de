# backend/fittrack/errors.py
"""
Failures raised by the service layer.

Routes catch these and turn them into JSON responses using ``status_code``;
nothing here knows about Flask.
"""


class FitTrackError(Exception):
    status_code = 500
    message = "The server encountered an error and cannot complete your request"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(FitTrackError):
    """One or more request fields failed validation."""

    status_code = 400
    message = "validation failed"

    def __init__(self, errors):
        super().__init__()
        self.errors = list(errors)

    def to_dict(self):
        return {"errors": self.errors}


class HashingError(FitTrackError):
    """Deriving the password hash failed. Nothing was written."""


class PersistenceError(FitTrackError):
    """The store rejected the write or could not be reached."""


class ConflictError(PersistenceError):
    status_code = 409
    message = "a user with this email address already exists"


class InvalidCredentialsError(FitTrackError):
    status_code = 401
    message = "invalid credentials"
