"""Exit status mapping for CLI output.

Every date resolution failure is a usage error; an inverted bounding window
means the settings are wrong.
"""

from opal_downloader.constants import EX_CONFIG, EX_USAGE
from opal_downloader.dates.errors import ParseError, ParseErrorKind, WindowError

_PARSE_ERROR_EXIT_CODES = {
    ParseErrorKind.COULD_NOT_PARSE_DATE: EX_USAGE,
    ParseErrorKind.COULD_NOT_PARSE_NUMERIC_COMPONENT: EX_USAGE,
    ParseErrorKind.INVALID_MONTH: EX_USAGE,
    ParseErrorKind.INVALID_DATE_FOR_MONTH: EX_USAGE,
    ParseErrorKind.NO_SINGLE_DATE: EX_USAGE,
}


def exit_code_for(error: Exception) -> int:
    """Map a date resolution error to a sysexits.h status code."""
    if isinstance(error, ParseError):
        return _PARSE_ERROR_EXIT_CODES[error.kind]
    if isinstance(error, WindowError):
        return EX_CONFIG
    raise TypeError(f"No exit code for {type(error).__name__}")
