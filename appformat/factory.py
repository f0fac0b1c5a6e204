from dataclasses import field, make_dataclass, MISSING
from decimal import Decimal
from typing import Any, Dict, Iterable, Tuple, Type

from appformat.types import ScalarKind, kind_of

__all__ = ["make_record", "default_for"]

_defaults: Dict[ScalarKind, Any] = {
    ScalarKind.BOOL: False,
    ScalarKind.CHAR: "\0",
    ScalarKind.DECIMAL: Decimal(0),
    ScalarKind.DOUBLE: 0.0,
    ScalarKind.STRING: None,
    **{
        kind: 0
        for kind in ScalarKind
        if kind.name.startswith(("INT", "UINT"))
    },
}


def default_for(annotation: Any) -> Any:
    """Zero value for the scalar kind declared by an annotation

    Text strings default to `None`, i.e. absent.  Unsupported annotations have
    no default, and `dataclasses.MISSING` is returned.

    """
    return _defaults.get(kind_of(annotation), MISSING)


def make_record(cls_name: str, fields: Iterable[Tuple], **kwargs) -> Type:
    """Create a record dataclass that can be decoded into

    'fields' holds (name, type) or (name, type, default) items; a missing
    default is filled with `default_for(type)`.  Keyword arguments are passed
    to `dataclasses.make_dataclass`.

      Settings = make_record("Settings", [("Bool", bool), ("Byte", uint8, 7)])

    """
    specs = []
    for item in fields:
        if len(item) not in (2, 3):
            raise TypeError(f"Invalid field: {item!r}")
        name, tp = item[:2]
        default = item[2] if len(item) == 3 else default_for(tp)
        if default is MISSING:
            specs.append((name, tp))
        else:
            specs.append((name, tp, field(default=default)))
    return make_dataclass(cls_name, specs, **kwargs)
