class AppError(Exception):
    """Base exception for application errors."""

    status_code = 500

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class BadRequestError(AppError):
    """Raised when the request is rejected before reaching storage."""

    status_code = 400


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    status_code = 404

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")


class StorageError(AppError):
    """Raised when the database returns something the service cannot use."""
