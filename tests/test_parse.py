"""Pytest-based script parser tests.

Test cases live in parser/*.tests. Expected is either a dump of the parsed
script (one node per line, prefixed by its line number) or
'error: <message>'.
"""

from pathlib import Path

import pytest

from conftest import discover_tests
from setalgebra import ParseError, parse
from setalgebra.ast import (
    BinaryOpCmd,
    CartesianCmd,
    Command,
    EqualCmd,
    InsertCmd,
    InvalidCmd,
    PowerSetCmd,
    PrintCmd,
    Script,
    SetsCmd,
    SizeCmd,
    SubsetCmd,
    UnknownCmd,
)
from setalgebra.parse import Parser, split_words

PARSE_DIR = Path(__file__).parent / "parser"


def dump_command(cmd: Command) -> str:
    if isinstance(cmd, PrintCmd):
        return "print " + cmd.name
    if isinstance(cmd, SizeCmd):
        return "size " + cmd.name
    if isinstance(cmd, InsertCmd):
        return "insert " + cmd.name + " " + repr(cmd.value)
    if isinstance(cmd, BinaryOpCmd):
        return cmd.op + " " + cmd.left + " " + cmd.right
    if isinstance(cmd, SubsetCmd):
        return "issubset " + cmd.left + " " + cmd.right
    if isinstance(cmd, EqualCmd):
        return "isequal " + cmd.left + " " + cmd.right
    if isinstance(cmd, PowerSetCmd):
        return "powerset " + cmd.name
    if isinstance(cmd, CartesianCmd):
        return "cartesian " + cmd.left + " " + cmd.right
    if isinstance(cmd, SetsCmd):
        return "sets"
    if isinstance(cmd, UnknownCmd):
        return "unknown " + cmd.word
    if isinstance(cmd, InvalidCmd):
        return "invalid " + cmd.word + ": " + cmd.message
    raise AssertionError("unexpected node: " + type(cmd).__name__)


def dump_script(script: Script) -> str:
    lines = ["elements " + script.element_type]
    for d in script.definitions:
        lines.append(
            str(d.pos.line) + ": def " + d.name + " " + str(d.count)
            + " " + repr(d.elements)
        )
    for cmd in script.commands:
        lines.append(str(cmd.pos.line) + ": " + dump_command(cmd))
    return "\n".join(lines)


def pytest_generate_tests(metafunc):
    """Parametrize tests over parser test files."""
    if "parse_input" in metafunc.fixturenames:
        params = [
            pytest.param(input_text, expected, id=test_id)
            for test_id, input_text, expected in discover_tests(PARSE_DIR)
        ]
        metafunc.parametrize("parse_input,parse_expected", params)


def test_parse(parse_input: str, parse_expected: str):
    """Verify parser produces expected result."""
    try:
        script = parse(parse_input)
    except ParseError as e:
        assert parse_expected == "error: " + str(e)
        return
    assert not parse_expected.startswith("error:"), "expected failure, parsed ok"
    assert dump_script(script) == parse_expected


def test_explicit_element_type_overrides_pragma():
    script = parse("# pragma elements str\nA 1\n7\n", "int")
    assert script.element_type == "int"
    assert script.definitions[0].elements == [7]


def test_parser_rejects_unknown_element_type():
    with pytest.raises(ValueError):
        Parser("", "complex")


def test_parse_error_location():
    with pytest.raises(ParseError) as excinfo:
        parse("A 2\n1 x\n")
    assert excinfo.value.line == 2
    assert excinfo.value.col == 3
    assert excinfo.value.msg == "invalid int element 'x'"


def test_count_mismatch_is_logged(caplog):
    with caplog.at_level("WARNING", logger="setalgebra"):
        script = parse("A 3\n1 2\n")
    assert script.definitions[0].elements == [1, 2]
    assert "declares 3 element(s) but lists 2 distinct" in caplog.text


def test_split_words_columns():
    words = split_words("  union  A B")
    assert [(w.value, w.col) for w in words] == [("union", 3), ("A", 10), ("B", 12)]
