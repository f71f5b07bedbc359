from .accessors import error_code, error_message, error_status, is_error
from .base import StatusCode, StructuredError, SupportsStructured, SyntheticCause, as_structured
from .factory import INTERNAL_ERROR, UNKNOWN_ERROR, define, from_definition, new, wrap
from .status import status_text

__all__ = [
    "INTERNAL_ERROR",
    "UNKNOWN_ERROR",
    "StatusCode",
    "StructuredError",
    "SupportsStructured",
    "SyntheticCause",
    "as_structured",
    "define",
    "error_code",
    "error_message",
    "error_status",
    "from_definition",
    "is_error",
    "new",
    "status_text",
    "wrap",
]
