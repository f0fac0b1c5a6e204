"""Errors raised while decoding or encoding the Application format

Every failure aborts the whole operation.  Decode and encode failures share a
common base, `ApplicationFormatError`, and are further split into the
`DecodeError` and `EncodeError` families.  `UnsupportedKindError` belongs to
both.  Each class also derives from the closest builtin exception, so callers
may catch e.g. `ValueError` as well.

"""

from typing import Any, Optional, Type

__all__ = [
    "ApplicationFormatError",
    "DecodeError",
    "EncodeError",
    "EmptyInputError",
    "MalformedLineError",
    "MissingFieldError",
    "CoercionError",
    "UnsupportedKindError",
    "InvalidValueError",
    "NoFieldsError",
]


def _at(lineno: Optional[int]) -> str:
    return f"line {lineno}: " if lineno is not None else ""


class ApplicationFormatError(Exception):
    """Base class for all Application format errors"""


class DecodeError(ApplicationFormatError):
    """Text could not be decoded into a record"""


class EncodeError(ApplicationFormatError):
    """Record could not be encoded into text"""


class EmptyInputError(DecodeError, ValueError):
    def __init__(self):
        super().__init__("Application string can not be empty or whitespace-only")


class MalformedLineError(DecodeError, ValueError):
    def __init__(self, lineno: int, line: str):
        self.lineno = lineno
        self.line = line
        super().__init__(f"{_at(lineno)}not a key-value pair: {line!r}")


class MissingFieldError(DecodeError, KeyError):
    def __init__(
        self, name: str, record_t: Type, lineno: Optional[int] = None
    ):
        self.name = name
        self.record_t = record_t
        self.lineno = lineno
        super().__init__(name)

    def __str__(self) -> str:
        # KeyError.__str__ would show the repr of the first argument only
        return (
            f"{_at(self.lineno)}{self.record_t.__name__} has no field "
            f"corresponding to key {self.name!r}"
        )


class CoercionError(DecodeError, ValueError):
    def __init__(self, text: str, kind: Any, lineno: Optional[int] = None):
        self.text = text
        self.kind = kind
        self.lineno = lineno
        super().__init__(text, kind)

    def __str__(self) -> str:
        kind = getattr(self.kind, "value", self.kind)
        return f"{_at(self.lineno)}could not convert {self.text!r} to {kind}"


class UnsupportedKindError(DecodeError, EncodeError, TypeError):
    def __init__(
        self,
        field: Optional[str],
        annotation: Any,
        lineno: Optional[int] = None,
    ):
        self.field = field
        self.annotation = annotation
        self.lineno = lineno
        subject = f"field {field!r}" if field is not None else "value"
        super().__init__(
            f"{_at(lineno)}{subject} has a type that is unsupported by "
            f"the Application format: {annotation!r}"
        )


class InvalidValueError(EncodeError, ValueError):
    def __init__(self, field: Optional[str], value: Any, kind: Any):
        self.field = field
        self.value = value
        self.kind = kind
        subject = f"field {field!r}" if field is not None else "value"
        super().__init__(
            f"{subject}: {value!r} is not a valid {getattr(kind, 'value', kind)}"
        )


class NoFieldsError(EncodeError, TypeError):
    def __init__(self, record_t: Type):
        self.record_t = record_t
        super().__init__(f"could not find any fields for type {record_t.__name__}")
