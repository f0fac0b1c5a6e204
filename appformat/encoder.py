"""Application format encoder"""

import logging
from typing import Any

from appformat.coercers import to_text
from appformat.errors import NoFieldsError, UnsupportedKindError
from appformat.shapes import FieldDescriptor, get_shape

__all__ = ["render_line", "encode"]

logger = logging.getLogger(__name__)

LINE_END = "\r\n"


def render_line(field: FieldDescriptor, value: Any) -> str:
    """Render one ``Name: value`` line, including the line terminator"""
    return f"{field.name}: {to_text(value, field.kind, field.name)}{LINE_END}"


def encode(record: Any) -> str:
    """Encode a record into Application format text

    Fields are written in declaration order, fields without a value (`None`)
    are left out.

    Parameters
    ----------
    record
        A record dataclass instance

    Returns
    -------
    str

    Raises
    ------
    NoFieldsError
        If the record type does not declare any fields
    UnsupportedKindError
        If a field has an unsupported type, whether it has a value or not
    InvalidValueError
        If a value does not fit the type of its field, or a character or
        string contains a line break

    """
    shape = get_shape(type(record))
    if not shape.fields:
        raise NoFieldsError(shape.record_t)

    lines = []
    for field in shape:
        if not field.supported:
            raise UnsupportedKindError(field.name, field.annotation)
        value = field.get(record)
        if value is not None:
            lines.append(render_line(field, value))

    logger.debug("encoded %d of %d fields", len(lines), len(shape))
    return "".join(lines)
