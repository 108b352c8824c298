from typing import Optional

INVALID_KEY_MARKERS = ("API key not valid",)


class ContentGenerationError(Exception):
    """Base for every failure surfaced by the generation core."""

    kind = "ContentGenerationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(ContentGenerationError):
    kind = "InvalidInput"


class MissingCredential(ContentGenerationError):
    kind = "MissingCredential"


class InvalidCredential(ContentGenerationError):
    kind = "InvalidCredential"


class EmptyResponse(ContentGenerationError):
    kind = "EmptyResponse"


class SchemaViolation(ContentGenerationError):
    kind = "SchemaViolation"


class BackendError(ContentGenerationError):
    kind = "BackendError"

    def __init__(self, message: str, backend_message: Optional[str] = None):
        super().__init__(message)
        self.backend_message = backend_message


def is_invalid_key_message(message: str) -> bool:
    return any(marker in (message or "") for marker in INVALID_KEY_MARKERS)


def classify_backend_error(exc: BaseException) -> ContentGenerationError:
    """
    Map an exception raised by the Gemini SDK (or the transport below it)
    onto the error taxonomy. Errors that are already classified pass through.
    """
    if isinstance(exc, ContentGenerationError):
        return exc
    backend_message = str(exc) or exc.__class__.__name__
    if is_invalid_key_message(backend_message):
        return InvalidCredential(
            "The API key was rejected by the generation service. Please check it in settings."
        )
    return BackendError(f"Failed to generate content: {backend_message}", backend_message=backend_message)
