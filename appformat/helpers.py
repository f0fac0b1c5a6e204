import json
from pathlib import Path
from typing import Dict, TextIO, Union

import yaml

__all__ = [
    "read_yaml",
    "to_yaml",
    "read_json",
    "to_json",
]


def read_yaml(fpath: Union[str, Path, TextIO]) -> Dict:
    """Read a yaml file (or stream) into a dictionary"""
    if hasattr(fpath, "read"):
        return yaml.safe_load(fpath) or {}
    with open(fpath) as fp:
        return yaml.safe_load(fp) or {}


def to_yaml(obj, fpath: Union[str, Path]):
    """Serialise Python object to yaml"""
    with open(fpath, mode="w") as fp:
        yaml.dump(obj, fp)


def read_json(fpath: Union[str, Path, TextIO]) -> Dict:
    """Read a json file (or stream) into a dictionary"""
    if hasattr(fpath, "read"):
        return json.load(fpath)
    with open(fpath) as fp:
        return json.load(fp)


def to_json(obj, fpath: Union[str, Path]):
    """Serialise Python object to json"""
    with open(fpath, mode="w") as fp:
        json.dump(obj, fp)

