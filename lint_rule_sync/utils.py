import json
import re
from pathlib import Path
from typing import Any


_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_DASH_CHAR_RE = re.compile(r"-(.)")


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def camel_case_to_dash(name: str) -> str:
    return _CAMEL_BOUNDARY_RE.sub(r"\1-\2", name).lower()


def to_camel_case(name: str) -> str:
    return _DASH_CHAR_RE.sub(lambda match: match.group(1).upper(), name)


def identity(name: str) -> str:
    return name
