"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class PersistenceError(ApplicationError):
    """Exception raised for errors at the storage boundary."""

    def __init__(
        self, message: str = "Database operation failed", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message, original_exception)
        self.message = f"Persistence Error: {message}"


class ValidationError(ApplicationError):
    """Exception raised when input breaks a business rule before reaching storage."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)
