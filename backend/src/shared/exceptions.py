class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Raised when a requested resource does not exist."""

    def __init__(self, resource: str = "Resource", id: str = ""):
        super().__init__(f"{resource} not found: {id}" if id else f"{resource} not found")


class ParseError(AppError):
    """Raised when a textual payload is not a valid JSON object."""

    def __init__(self, message: str = "Payload is not a valid JSON document"):
        super().__init__(message)


class ValidationError(AppError):
    """Raised when a payload does not match the declared shape."""

    def __init__(self, message: str = "Payload failed validation", errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
