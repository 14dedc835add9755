"""
Parsing errors for shortcode fields and duration strings.

Both derive from ValueError so callers that only care about bad input can
catch the builtin.
"""

from typing import Optional, Dict, Any


class ShortcodeParseError(ValueError):
    """Raised when a matched shortcode carries a field that cannot be parsed."""

    def __init__(self, message: str, shortcode: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.shortcode = shortcode
        self.context = context or {}
        self.recoverable = False


class MalformedNumberError(ShortcodeParseError):
    """Payout or barrier token is not a number."""

    def __init__(self, message: str, raw_value: Optional[str] = None,
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.field = field


class InvalidDurationError(ValueError):
    """Duration string such as '5t' or '3h' cannot be parsed."""

    def __init__(self, message: str, duration: Optional[str] = None):
        super().__init__(message)
        self.duration = duration
        self.recoverable = False
