"""Set algebra over named collections, driven by a command script."""

from __future__ import annotations

from .ast import Script
from .collection import (
    BINARY_OPERATIONS as BINARY_OPERATIONS,
    UNARY_OPERATIONS as UNARY_OPERATIONS,
    DataSetCollection as DataSetCollection,
    SetCollectionError as SetCollectionError,
    SetNotFoundError as SetNotFoundError,
    UnsupportedOperationError as UnsupportedOperationError,
)
from .dataset import DataSet as DataSet, Pair as Pair
from .parse import ELEMENT_TYPES, ParseError as ParseError, parse_source
from .runtime import RunResult as RunResult, run as run

PRAGMA_PREFIX = "pragma "


def _extract_pragmas(source: str) -> str | None:
    """Scan leading comment lines for pragmas. Returns the element type, if set."""
    element_type: str | None = None
    for lineno, line in enumerate(source.split("\n"), start=1):
        stripped = line.strip()
        if stripped == "":
            continue
        if not stripped.startswith("#"):
            break
        body = stripped[1:].strip()
        if not body.startswith(PRAGMA_PREFIX):
            continue
        words = body[len(PRAGMA_PREFIX) :].split()
        if len(words) != 2 or words[0] != "elements":
            raise ParseError("unknown pragma '" + body + "'", lineno, 1)
        if words[1] not in ELEMENT_TYPES:
            raise ParseError("unknown element type '" + words[1] + "'", lineno, 1)
        element_type = words[1]
    return element_type


def parse(source: str, element_type: str | None = None) -> Script:
    """Parse a script. An explicit element_type overrides any pragma."""
    if element_type is None:
        element_type = _extract_pragmas(source) or "int"
    return parse_source(source, element_type)


def run_source(source: str, element_type: str | None = None) -> RunResult:
    """Parse and run a script in a fresh collection."""
    return run(parse(source, element_type))
