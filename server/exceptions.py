"""Custom exception classes for the API server."""


class FilesManagerError(Exception):
    """
    Base exception class for all request-level errors.
    """
    pass


class BadRequestError(FilesManagerError):
    """
    Raised when input is missing, malformed or not an allowed value.
    """
    pass


class UnauthorizedError(FilesManagerError):
    """
    Raised when a token is missing, unknown or expired, or credentials are wrong.
    """

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFoundError(FilesManagerError):
    """
    Raised when a file does not exist or the caller may not see it.

    Access denial is reported with this same error so that callers cannot
    probe for the existence of other users' files.
    """

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
