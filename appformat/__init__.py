"""AppFormat

A codec between the flat, line-oriented ``Name: value`` Application format and
record dataclasses whose fields are all scalars.

"""

from appformat.errors import (
    ApplicationFormatError,
    CoercionError,
    DecodeError,
    EmptyInputError,
    EncodeError,
    InvalidValueError,
    MalformedLineError,
    MissingFieldError,
    NoFieldsError,
    UnsupportedKindError,
)
from appformat.factory import make_record
from appformat.options import SerializerOptions
from appformat.serializer import ApplicationSerializer, decode, encode
from appformat.types import ScalarKind

__version__ = "0.1.dev0"
