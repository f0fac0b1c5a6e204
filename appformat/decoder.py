"""Application format decoder

The text is split into lines (``\\r\\n``, ``\\n``, or ``\\r`` terminated), and
every line must be a ``Name: value`` pair.  Only the first colon separates the
name from the value, the name is used verbatim, and the value is trimmed.
Blank lines are not allowed.  When a field appears more than once, the last
line wins.

"""

import logging
import re
from typing import Any, Iterator, List, Optional, Tuple, Type, TypeVar

from appformat.coercers import from_text
from appformat.errors import (
    CoercionError,
    EmptyInputError,
    MalformedLineError,
    MissingFieldError,
    UnsupportedKindError,
)
from appformat.shapes import get_shape
from appformat.types import ScalarKind

__all__ = ["split_lines", "split_pair", "decode"]

logger = logging.getLogger(__name__)

_record_t = TypeVar("_record_t")
_newline = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split text into lines, without the line terminators

    A terminator at the very end does not start a new line, everything else
    (including blank lines) is preserved.

    """
    lines = _newline.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def split_pair(line: str, lineno: int) -> Tuple[str, str]:
    """Split a line into a verbatim field name, and a trimmed value

    Raises
    ------
    MalformedLineError
        If the line has no colon

    """
    name, sep, value = line.partition(":")
    if not sep:
        raise MalformedLineError(lineno, line)
    return name, value.strip()


def _pairs(text: str) -> Iterator[Tuple[int, str, str]]:
    for lineno, line in enumerate(split_lines(text), start=1):
        yield (lineno, *split_pair(line, lineno))


def decode(
    text: Optional[str], record_t: Type[_record_t], case_insensitive: bool = False
) -> _record_t:
    """Decode Application format text into a new record

    Parameters
    ----------
    text : str
        Application format text
    record_t : Type
        Record dataclass to instantiate; it must be constructible without
        arguments
    case_insensitive : bool
        Match field names in a case-insensitive fashion

    Returns
    -------
    A populated instance of `record_t`

    Raises
    ------
    EmptyInputError
        If `text` is `None`, empty, or whitespace only
    MalformedLineError
        If a line is not a key-value pair
    MissingFieldError
        If a key has no corresponding field
    UnsupportedKindError
        If the matching field has an unsupported type
    CoercionError
        If a value can not be converted to the type of its field

    """
    if text is None or not text.strip():
        raise EmptyInputError()

    shape = get_shape(record_t)
    record = shape.new()
    seen = set()
    for lineno, name, value in _pairs(text):
        try:
            field = shape.resolve(name, case_insensitive)
        except MissingFieldError as err:
            err.lineno = lineno
            raise

        if not field.supported:
            raise UnsupportedKindError(field.name, field.annotation, lineno)

        converted: Any
        if field.kind is ScalarKind.STRING:
            converted = value
        else:
            try:
                converted = from_text(value, field.kind, field.name)
            except CoercionError as err:
                err.lineno = lineno
                raise

        if field.name in seen:
            logger.debug("line %d: overwriting %s", lineno, field.name)
        seen.add(field.name)
        field.set(record, converted)

    logger.debug("decoded %d fields into %s", len(seen), record_t.__name__)
    return record
