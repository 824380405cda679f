"""Domain-specific exceptions — framework-independent."""


class MissingFieldsError(Exception):
    """Raised when required fields are absent, null, or blank after trimming.

    ``fields`` uses the wire (camelCase) names so the message can be shown
    to the editor as-is.
    """

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(f"Missing fields: {', '.join(self.fields)}")


class UploadError(Exception):
    """Raised when an upload exceeds the size/count ceilings or cannot be stored."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class PersistenceError(Exception):
    """Raised when the store fails unexpectedly.

    ``message`` is the short, client-safe text; the underlying exception is
    chained and logged server-side only.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NetworkError(Exception):
    """Raised by the content API client on timeout, abort or connection failure."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Request to {url} failed: {reason}")


class ContentApiError(Exception):
    """Raised by the content API client when the service answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class ForbiddenError(Exception):
    """Raised when a write is attempted without the configured admin token."""

    def __init__(self, message: str = "Forbidden"):
        self.message = message
        super().__init__(message)
