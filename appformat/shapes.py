"""Record shapes and field name resolution

A record shape is the ordered table of field descriptors of a record
dataclass.  Only the fields declared on the class itself are part of the
shape: inherited fields, class variables, init-only variables and fields
starting with an underscore are ignored.  The table is built once per class.

"""

from dataclasses import dataclass, fields, is_dataclass
from functools import lru_cache
from inspect import get_annotations
import logging
from typing import Any, Optional, Tuple, Type
from warnings import warn

from boltons.iterutils import first
from glom import Path as gPath
from glom import assign, glom
from typing_extensions import get_type_hints

from appformat.errors import MissingFieldError
from appformat.types import ScalarKind, is_supported, kind_of

__all__ = ["FieldDescriptor", "RecordShape", "get_shape", "resolve_field"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of a record field

    Parameters
    ----------
    name : str
        Field name, as written in the Application format
    kind : Optional[ScalarKind]
        Declared scalar kind; `None` when the annotation is not supported
    annotation
        The resolved field annotation

    """

    name: str
    kind: Optional[ScalarKind]
    annotation: Any = None

    @property
    def supported(self) -> bool:
        return is_supported(self.kind)

    def get(self, record: Any) -> Any:
        return glom(record, gPath(self.name))

    def set(self, record: Any, value: Any) -> None:
        assign(record, gPath(self.name), value)


@dataclass(frozen=True)
class RecordShape:
    record_t: Type
    fields: Tuple[FieldDescriptor, ...]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self):
        return iter(self.fields)

    def new(self) -> Any:
        """Allocate an empty record"""
        return self.record_t()

    def resolve(self, name: str, case_insensitive: bool = False) -> FieldDescriptor:
        return resolve_field(self, name, case_insensitive)


def _own_fields(record_t: Type) -> Tuple[str, ...]:
    if not is_dataclass(record_t):
        return ()
    own = get_annotations(record_t)
    return tuple(
        f.name
        for f in fields(record_t)
        if f.name in own and not f.name.startswith("_")
    )


@lru_cache(maxsize=None)
def get_shape(record_t: Type) -> RecordShape:
    """Build the field descriptor table for a record type

    Parameters
    ----------
    record_t : Type
        A dataclass; any other class has an empty shape

    Returns
    -------
    RecordShape
        Field descriptors in declaration order

    """
    names = _own_fields(record_t)
    hints = get_type_hints(record_t, include_extras=True) if names else {}
    descriptors = tuple(
        FieldDescriptor(name, kind_of(hints[name]), hints[name]) for name in names
    )
    logger.debug(
        "%s: %s",
        record_t.__name__,
        ", ".join(f"{d.name}:{getattr(d.kind, 'value', None)}" for d in descriptors),
    )
    return RecordShape(record_t, descriptors)


def resolve_field(
    shape: RecordShape, name: str, case_insensitive: bool = False
) -> FieldDescriptor:
    """Find the field matching a key from the Application format

    Parameters
    ----------
    shape : RecordShape
        Shape of the target record
    name : str
        Field name as it appears in the text, not trimmed
    case_insensitive : bool
        Fall back to a lower-cased match if no field matches exactly

    Returns
    -------
    FieldDescriptor

    Raises
    ------
    MissingFieldError
        If no field matches `name`

    """
    match = first(shape.fields, key=lambda f: f.name == name)
    if match is None and case_insensitive:
        lowered = name.lower()
        matches = [f for f in shape.fields if f.name.lower() == lowered]
        if len(matches) > 1:
            warn(
                f"ambiguous key {name!r} matches {[f.name for f in matches]}, "
                f"using {matches[0].name!r}",
                category=UserWarning,
            )
        match = matches[0] if matches else None
    if match is None:
        raise MissingFieldError(name, shape.record_t)
    return match
