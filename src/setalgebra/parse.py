"""Script parser: line oriented, one method per section of the format.

    <name> <count>          set definitions, until a line "Q"
    <e1> <e2> ...
    Q
    <command> <args...>     commands, until "Q" or end of input
"""

from __future__ import annotations

import logging
from typing import Callable

from .ast import (
    BinaryOpCmd,
    CartesianCmd,
    Command,
    EqualCmd,
    InsertCmd,
    InvalidCmd,
    Pos,
    PowerSetCmd,
    PrintCmd,
    Script,
    SetDef,
    SetsCmd,
    SizeCmd,
    SubsetCmd,
    UnknownCmd,
)

logger = logging.getLogger(__name__)

END_MARKER = "Q"
COMMENT_PREFIX = "#"

ELEMENT_TYPES: dict[str, Callable[[str], object]] = {
    "int": int,
    "float": float,
    "str": str,
}

COMMAND_ARITY: dict[str, int] = {
    "print": 1,
    "size": 1,
    "insert": 2,
    "union": 2,
    "intersection": 2,
    "difference": 2,
    "symmetric_difference": 2,
    "issubset": 2,
    "isequal": 2,
    "powerset": 1,
    "cartesian": 2,
    "sets": 0,
}


class ParseError(Exception):
    """Parse error with location info."""

    def __init__(self, msg: str, line: int, col: int):
        self.msg: str = msg
        self.line: int = line
        self.col: int = col
        super().__init__(msg + " at line " + str(line) + " col " + str(col))


class Word:
    """A whitespace-delimited token and its 1-indexed column."""

    def __init__(self, value: str, col: int):
        self.value: str = value
        self.col: int = col

    def __repr__(self) -> str:
        return "Word(" + repr(self.value) + ", " + str(self.col) + ")"


def split_words(line: str) -> list[Word]:
    words: list[Word] = []
    i = 0
    while i < len(line):
        if line[i].isspace():
            i += 1
            continue
        start = i
        while i < len(line) and not line[i].isspace():
            i += 1
        words.append(Word(line[start:i], start + 1))
    return words


class Parser:
    """Parser over the lines of a script."""

    def __init__(self, source: str, element_type: str = "int"):
        if element_type not in ELEMENT_TYPES:
            raise ValueError("unknown element type: " + element_type)
        self.lines: list[str] = source.split("\n")
        self.pos: int = 0
        self.element_type: str = element_type
        self.convert: Callable[[str], object] = ELEMENT_TYPES[element_type]

    # ── Helpers ──────────────────────────────────────────────

    def next_line(self) -> tuple[int, str] | None:
        """Advance to the next significant line. Returns (lineno, text)."""
        while self.pos < len(self.lines):
            text = self.lines[self.pos].strip()
            self.pos += 1
            if text == "" or text.startswith(COMMENT_PREFIX):
                continue
            return self.pos, self.lines[self.pos - 1]
        return None

    def raw_line(self) -> tuple[int, str] | None:
        """Advance one physical line, blank or not. Returns (lineno, text)."""
        if self.pos >= len(self.lines):
            return None
        self.pos += 1
        return self.pos, self.lines[self.pos - 1]

    def convert_word(self, word: Word) -> object:
        """Convert a token to the element type. Raises ValueError."""
        try:
            return self.convert(word.value)
        except ValueError:
            raise ValueError(
                "invalid " + self.element_type + " element '" + word.value + "'"
            ) from None

    # ── Top Level ────────────────────────────────────────────

    def parse_script(self) -> Script:
        script = Script(element_type=self.element_type)
        script.definitions = self.parse_definitions()
        script.commands = self.parse_commands()
        return script

    # ── Definitions ──────────────────────────────────────────

    def parse_definitions(self) -> list[SetDef]:
        defs: list[SetDef] = []
        while True:
            entry = self.next_line()
            if entry is None:
                return defs
            lineno, text = entry
            if text.strip() == END_MARKER:
                return defs
            defs.append(self.parse_definition(lineno, text))

    def parse_definition(self, lineno: int, text: str) -> SetDef:
        words = split_words(text)
        name = words[0]
        if len(words) < 2:
            end = name.col + len(name.value)
            raise ParseError("expected '<name> <count>'", lineno, end)
        if len(words) > 2:
            extra = words[2]
            raise ParseError("unexpected '" + extra.value + "'", lineno, extra.col)
        count_word = words[1]
        try:
            count = int(count_word.value)
        except ValueError:
            raise ParseError(
                "invalid element count '" + count_word.value + "'",
                lineno,
                count_word.col,
            ) from None
        if count < 0:
            raise ParseError("negative element count", lineno, count_word.col)
        pos = Pos(lineno, name.col)
        if count == 0:
            return SetDef(pos, name.value, 0, [])
        elements = self.parse_elements(name.value, lineno)
        distinct: list[object] = []
        for value in elements:
            if value not in distinct:
                distinct.append(value)
        if len(distinct) != count:
            logger.warning(
                "set %r declares %d element(s) but lists %d distinct",
                name.value,
                count,
                len(distinct),
            )
        return SetDef(pos, name.value, count, elements)

    def parse_elements(self, set_name: str, header_line: int) -> list[object]:
        # The elements line is always the line after the header, so "Q" or
        # "#x" are ordinary elements here.
        entry = self.raw_line()
        if entry is None:
            raise ParseError(
                "missing elements line for set '" + set_name + "'", header_line, 1
            )
        lineno, text = entry
        values: list[object] = []
        for word in split_words(text):
            try:
                values.append(self.convert_word(word))
            except ValueError as e:
                raise ParseError(str(e), lineno, word.col) from None
        return values

    # ── Commands ─────────────────────────────────────────────

    def parse_commands(self) -> list[Command]:
        cmds: list[Command] = []
        while True:
            entry = self.next_line()
            if entry is None:
                return cmds
            lineno, text = entry
            if text.strip() == END_MARKER:
                return cmds
            cmds.append(self.parse_command(lineno, text))

    def parse_command(self, lineno: int, text: str) -> Command:
        words = split_words(text)
        head = words[0]
        pos = Pos(lineno, head.col)
        word = head.value
        args = [w.value for w in words[1:]]
        if word not in COMMAND_ARITY:
            return UnknownCmd(pos, word)
        arity = COMMAND_ARITY[word]
        if len(args) != arity:
            return InvalidCmd(
                pos, word, word + " expects " + str(arity) + " argument(s)"
            )
        if word == "print":
            return PrintCmd(pos, args[0])
        if word == "size":
            return SizeCmd(pos, args[0])
        if word == "insert":
            try:
                value = self.convert_word(words[2])
            except ValueError as e:
                return InvalidCmd(pos, word, str(e))
            return InsertCmd(pos, args[0], value)
        if word == "issubset":
            return SubsetCmd(pos, args[0], args[1])
        if word == "isequal":
            return EqualCmd(pos, args[0], args[1])
        if word == "powerset":
            return PowerSetCmd(pos, args[0])
        if word == "cartesian":
            return CartesianCmd(pos, args[0], args[1])
        if word == "sets":
            return SetsCmd(pos)
        return BinaryOpCmd(pos, word, args[0], args[1])


def parse_source(source: str, element_type: str = "int") -> Script:
    """Parse script text with a fixed element type."""
    return Parser(source, element_type).parse_script()
