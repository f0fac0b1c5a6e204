"""Serialize records to, and deserialize records from, the Application format

The Application format is a simple key-value format that supports only basic
scalar types, and does not support nesting and nulls:

    Bool: True
    Byte: 255
    Char: !

"""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from appformat import decoder, encoder
from appformat.options import SerializerOptions, _source_t

__all__ = ["ApplicationSerializer", "decode", "encode"]

_record_t = TypeVar("_record_t")


class ApplicationSerializer:
    """Converts between records and Application format text

    Instances only hold immutable options, and may be shared between threads.

    Parameters
    ----------
    options : SerializerOptions, optional
        Serializer options; alternatively pass the options as keyword
        arguments, e.g. ``ApplicationSerializer(case_insensitive=True)``

    """

    def __init__(self, options: Optional[SerializerOptions] = None, **kwargs):
        if options is not None and kwargs:
            raise TypeError("pass either options, or keyword arguments, not both")
        self.options = options if options is not None else SerializerOptions(**kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"

    @classmethod
    def from_yaml(cls, yaml_path: _source_t) -> ApplicationSerializer:
        return cls(SerializerOptions.from_yaml(yaml_path))

    @classmethod
    def from_json(cls, json_path: _source_t) -> ApplicationSerializer:
        return cls(SerializerOptions.from_json(json_path))

    def decode(self, text: Optional[str], record_t: Type[_record_t]) -> _record_t:
        return decoder.decode(text, record_t, self.options.case_insensitive)

    def encode(self, record: Any) -> str:
        return encoder.encode(record)


def decode(
    text: Optional[str], record_t: Type[_record_t], *, case_insensitive: bool = False
) -> _record_t:
    """Decode Application format text into a new `record_t` instance"""
    return decoder.decode(text, record_t, case_insensitive)


def encode(record: Any) -> str:
    """Encode a record into Application format text"""
    return encoder.encode(record)
