"""Scalar kinds supported by the Application format

Field kinds are declared through annotations on a record dataclass.  The
builtin types map to a default kind, the aliases defined here select a
specific width:

>>> kind_of(bool)
<ScalarKind.BOOL: 'bool'>
>>> kind_of(uint8)
<ScalarKind.UINT8: 'uint8'>
>>> kind_of(int)
<ScalarKind.INT32: 'int32'>
>>> kind_of(list) is None
True

"""

from builtins import bool, float, int, str
from decimal import Decimal
from enum import Enum
from types import UnionType
from typing import Any, Dict, Optional, Tuple, Union

from typing_extensions import Annotated, get_args, get_origin

__all__ = [
    "ScalarKind",
    "SUPPORTED_KINDS",
    "INTEGER_BOUNDS",
    "bool",
    "int",
    "float",
    "str",
    "Decimal",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "char",
    "kind_of",
    "is_supported",
]


class ScalarKind(Enum):
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    CHAR = "char"
    DECIMAL = "decimal"
    DOUBLE = "double"
    STRING = "string"


SUPPORTED_KINDS = frozenset(ScalarKind)

# inclusive (min, max)
INTEGER_BOUNDS: Dict[ScalarKind, Tuple[int, int]] = {
    ScalarKind.INT8: (-(2 ** 7), 2 ** 7 - 1),
    ScalarKind.INT16: (-(2 ** 15), 2 ** 15 - 1),
    ScalarKind.INT32: (-(2 ** 31), 2 ** 31 - 1),
    ScalarKind.INT64: (-(2 ** 63), 2 ** 63 - 1),
    ScalarKind.UINT8: (0, 2 ** 8 - 1),
    ScalarKind.UINT16: (0, 2 ** 16 - 1),
    ScalarKind.UINT32: (0, 2 ** 32 - 1),
    ScalarKind.UINT64: (0, 2 ** 64 - 1),
}

int8 = Annotated[int, ScalarKind.INT8]
int16 = Annotated[int, ScalarKind.INT16]
int32 = Annotated[int, ScalarKind.INT32]
int64 = Annotated[int, ScalarKind.INT64]
uint8 = Annotated[int, ScalarKind.UINT8]
uint16 = Annotated[int, ScalarKind.UINT16]
uint32 = Annotated[int, ScalarKind.UINT32]
uint64 = Annotated[int, ScalarKind.UINT64]
char = Annotated[str, ScalarKind.CHAR]

_builtin_kinds = {
    bool: ScalarKind.BOOL,
    int: ScalarKind.INT32,
    float: ScalarKind.DOUBLE,
    Decimal: ScalarKind.DECIMAL,
    str: ScalarKind.STRING,
}


def kind_of(annotation: Any) -> Optional[ScalarKind]:
    """Find the scalar kind declared by a field annotation

    Parameters
    ----------
    annotation
        A (resolved) type annotation, as returned by
        ``get_type_hints(..., include_extras=True)``

    Returns
    -------
    Optional[ScalarKind]
        The declared kind, or `None` if the annotation does not map to any
        supported kind

    """
    origin = get_origin(annotation)
    if origin is Annotated:
        base, *metadata = get_args(annotation)
        kinds = [m for m in metadata if isinstance(m, ScalarKind)]
        return kinds[-1] if kinds else kind_of(base)
    if origin in (Union, UnionType):
        # only a text string has an "absent" marker
        if set(get_args(annotation)) == {str, type(None)}:
            return ScalarKind.STRING
        return None
    try:
        return _builtin_kinds.get(annotation)
    except TypeError:  # unhashable annotation
        return None


def is_supported(kind: Optional[ScalarKind]) -> bool:
    return kind in SUPPORTED_KINDS
