from typing import Any, Optional

__all__ = [
    "ChangelogError",
    "InputReadError",
    "ParseError",
    "SchemaError",
    "DateFormatError",
    "full_error_message",
]


def full_class_name(obj):
    module = obj.__class__.__module__
    if module is None or module == str.__class__.__module__:
        return obj.__class__.__name__  # Avoid reporting __builtin__
    else:
        return module + "." + obj.__class__.__name__


def full_error_message(error):
    return "%s(%r)" % (full_class_name(error), str(error))


class ChangelogError(Exception):
    """
    Base type for all pkgchangelog errors, should NOT be constructed directly.
    When you try to do so, consider adding a new type of error.
    """


class InputReadError(ChangelogError, IOError):
    def __init__(self, error: Exception, name: str = "stdin"):
        super().__init__(
            "Cannot read changelog from %s: %s" % (name, full_error_message(error))
        )
        self.name = name
        self.__cause__ = error

    def __reduce__(self):
        return (self.__class__, (self.__cause__, self.name))


class ParseError(ChangelogError):
    """
    Base type for input that is not a changelog document of the expected shape.
    """


class SchemaError(ParseError):
    def __init__(self, reason: str, location: Optional[str] = None):
        message = reason
        if location:
            message = "%s: %s" % (location, reason)
        super().__init__(message)
        self.reason = reason
        self.location = location

    def __reduce__(self):
        return (SchemaError, (self.reason, self.location))


class DateFormatError(ParseError, ValueError):
    """
    Raised when a date does not match ``YYYY-MM-DD HH:MM:SS ±ZZZZ``.
    """

    def __init__(self, value: Any, location: Optional[str] = None):
        message = "invalid date %r, expected format 'YYYY-MM-DD HH:MM:SS +ZZZZ'" % (
            value,
        )
        if location:
            message = "%s: %s" % (location, message)
        super().__init__(message)
        self.value = value
        self.location = location

    def __reduce__(self):
        return (DateFormatError, (self.value, self.location))
