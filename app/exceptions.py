"""
Errors raised by the repository and service layers.

Every error carries the HTTP status and the message that ends up in the
``{"status": "error", "message": ...}`` envelope. They are converted to
responses in one place, the handler registered in ``app.main``.
"""


class CityServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"status": "error", "message": self.message}


class InvalidInputError(CityServiceError):
    """Missing parameter or malformed request body."""
    status_code = 400


class NotFoundError(CityServiceError):
    """The requested row does not exist (or the lookup matched nothing)."""
    status_code = 404


class StoreError(CityServiceError):
    """The database failed while running one stage of an operation."""
    status_code = 500
