# errors.py
"""Domain errors raised by the services and rendered by main.py."""


class GardenError(Exception):
    status_code = 500
    error_code = "GARDEN_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": {"code": self.error_code, "message": self.message}}


class ValidationError(GardenError):
    """Missing or malformed required field."""
    status_code = 400
    error_code = "VALIDATION_ERROR"


class NotFoundError(GardenError):
    status_code = 404
    error_code = "NOT_FOUND"


class AuthenticationError(GardenError):
    """Identity assertion missing or invalid."""
    status_code = 401
    error_code = "AUTHENTICATION_ERROR"


class StorageError(GardenError):
    """Underlying store failed. The message never carries driver detail."""
    status_code = 500
    error_code = "STORAGE_ERROR"
