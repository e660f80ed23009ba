"""Pytest configuration for the setalgebra test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for package imports
SRC_DIR = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_DIR))

from setalgebra import DataSet, DataSetCollection  # noqa: E402


def parse_tests_file(path: Path) -> list[tuple[str, str, str]]:
    """Parse a .tests file into (name, input, expected) tuples.

    Format:

        === test name
        input lines
        ---
        expected lines
        ---
    """
    lines = path.read_text(encoding="utf-8").split("\n")
    result: list[tuple[str, str, str]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("=== "):
            test_name = line[4:].strip()
            i += 1
            input_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                input_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            expected_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                expected_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            test_input = "\n".join(input_lines)
            expected = "\n".join(expected_lines).strip()
            result.append((test_name, test_input, expected))
        else:
            i += 1
    return result


def discover_tests(test_dir: Path) -> list[tuple[str, str, str]]:
    """Glob *.tests in test_dir, return (test_id, input, expected) tuples."""
    results = []
    for test_file in sorted(test_dir.glob("*.tests")):
        for name, input_text, expected in parse_tests_file(test_file):
            results.append((f"{test_file.stem}/{name}", input_text, expected))
    return results


@pytest.fixture
def abc() -> DataSet[int]:
    return DataSet("A", [1, 2, 3])


@pytest.fixture
def bcd() -> DataSet[int]:
    return DataSet("B", [2, 3, 4])


@pytest.fixture
def collection(abc, bcd) -> DataSetCollection[int]:
    coll: DataSetCollection[int] = DataSetCollection()
    coll.add_set(abc)
    coll.add_set(bcd)
    coll.add_set(DataSet("E"))
    return coll
