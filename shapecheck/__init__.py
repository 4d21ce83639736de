"""shapecheck: runtime shape validation for untyped values."""

__version__ = "0.1.0"

from shapecheck.config import Settings, get_settings, settings
from shapecheck.errors import ErrorCode, SchemaDefinitionError, ShapecheckError, ValidationError
from shapecheck.logging import configure_logging, get_logger
from shapecheck.validation import *  # noqa: F403
from shapecheck.validation import __all__ as _validation_all

__all__ = [
    "__version__",
    "Settings", "get_settings", "settings",
    "ErrorCode", "SchemaDefinitionError", "ShapecheckError", "ValidationError",
    "configure_logging", "get_logger",
    *_validation_all,
]
