"""Script AST: set definitions followed by commands."""

from __future__ import annotations

from dataclasses import dataclass, field


# ============================================================
# POSITION
# ============================================================


@dataclass
class Pos:
    """Source position, 1-indexed."""

    line: int
    col: int


# ============================================================
# DEFINITIONS
# ============================================================


@dataclass
class SetDef:
    """<name> <count> header plus its elements line."""

    pos: Pos
    name: str
    count: int
    elements: list[object]


# ============================================================
# COMMANDS
# ============================================================


@dataclass
class Command:
    """Base for all command nodes."""

    pos: Pos


@dataclass
class PrintCmd(Command):
    name: str


@dataclass
class SizeCmd(Command):
    name: str


@dataclass
class InsertCmd(Command):
    name: str
    value: object


@dataclass
class BinaryOpCmd(Command):
    """union | intersection | difference | symmetric_difference."""

    op: str
    left: str
    right: str


@dataclass
class SubsetCmd(Command):
    left: str
    right: str


@dataclass
class EqualCmd(Command):
    left: str
    right: str


@dataclass
class PowerSetCmd(Command):
    name: str


@dataclass
class CartesianCmd(Command):
    left: str
    right: str


@dataclass
class SetsCmd(Command):
    """List registered set names."""


@dataclass
class UnknownCmd(Command):
    word: str


@dataclass
class InvalidCmd(Command):
    """A recognised command word whose arguments did not parse."""

    word: str
    message: str


# ============================================================
# SCRIPT
# ============================================================


@dataclass
class Script:
    definitions: list[SetDef] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    element_type: str = "int"
