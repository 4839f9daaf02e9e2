# =============================================================================
# core/errors.py  |  Error taxonomy for the Comic Vine layer
# =============================================================================
#
# Every failure the server can report is one of these classes:
#
#   SchemaValidationError  → tool arguments or an upstream payload do not
#                            match the expected shape
#   UpstreamError          → Comic Vine answered with a non-2xx status
#                            (or a body that is not JSON)
#   TransportError         → the request never got an HTTP answer
#   UnknownOperationError  → a tool name that is not registered
#   ConfigurationError     → API key / base URL missing at startup
#
# They all share ComicVineError so the tools layer can catch one type.
# =============================================================================

from pydantic import ValidationError


class ComicVineError(Exception):
    """Base class for every error raised by the Comic Vine layer."""


class SchemaValidationError(ComicVineError):
    """Input or upstream output failed shape validation.

    ``fields`` lists the dotted paths of the offending fields, e.g.
    ``["limit"]`` or ``["results.0.id"]``.
    """

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []

    @classmethod
    def from_pydantic(
        cls,
        exc: ValidationError,
        context: str,
        prefix: str | None = None,
    ) -> "SchemaValidationError":
        fields = []
        problems = []
        for err in exc.errors():
            parts = ([prefix] if prefix else []) + [str(part) for part in err["loc"]]
            path = ".".join(parts) or "<root>"
            fields.append(path)
            problems.append(f"{path}: {err['msg']}")
        return cls(f"Invalid {context}: " + "; ".join(problems), fields)


class UpstreamError(ComicVineError):
    """Comic Vine responded, but not with a usable 2xx JSON body."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Comic Vine API error: {status} - {body}")
        self.status = status
        self.body = body


class TransportError(ComicVineError):
    """Network-level failure (DNS, refused connection, socket timeout)."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Could not reach Comic Vine: {cause}")
        self.cause = cause


class UnknownOperationError(ComicVineError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ConfigurationError(ComicVineError):
    """Required process configuration is missing."""
