"""Serializer configuration

The only setting is whether field names are matched case-insensitively while
decoding.  Options are immutable once created, and can be read from YAML or
JSON files:

    case_insensitive: true

"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Dict, TextIO, Union

from pydantic import ConfigDict, StrictBool
from pydantic.dataclasses import dataclass as pydantic_dataclass

from appformat.helpers import read_json, read_yaml, to_json, to_yaml

_file_t = Union[str, Path]
_source_t = Union[str, Path, TextIO]


@pydantic_dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class SerializerOptions:
    """Options for `ApplicationSerializer`

    Parameters
    ----------
    case_insensitive : bool
        Match field names in a case-insensitive fashion (default: False)

    """

    case_insensitive: StrictBool = False

    @classmethod
    def from_yaml(cls, yaml_path: _source_t) -> SerializerOptions:
        return cls(**read_yaml(yaml_path))

    @classmethod
    def from_json(cls, json_path: _source_t) -> SerializerOptions:
        return cls(**read_json(json_path))

    def to_dict(self) -> Dict:
        return asdict(self)

    def to_yaml(self, yaml_path: _file_t):
        to_yaml(self.to_dict(), yaml_path)

    def to_json(self, json_path: _file_t):
        to_json(self.to_dict(), json_path)
