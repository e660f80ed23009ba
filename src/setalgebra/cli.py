"""setalgebra CLI: run a set script file."""

from __future__ import annotations

import logging
import sys

from . import parse
from .logging_config import setup_logging
from .parse import ELEMENT_TYPES, ParseError
from .runtime import run


USAGE: str = """\
setalgebra [OPTIONS] FILE

Run a set algebra script. Each '<name> <count>' header with count > 0 is
followed by its elements on the very next line.

Options:
  --elements TYPE    Element type: int, float, str (default: pragma or int)
  --verbose          Log each command at debug level
  --log-file FILE    Also write log records to FILE
  --help             Show this help message
"""

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


class Options:
    """Parsed command-line options."""

    def __init__(self) -> None:
        self.filepath: str = ""
        self.element_type: str | None = None
        self.verbose: bool = False
        self.log_file: str | None = None


def _fail(msg: str, code: int) -> int:
    print("setalgebra: " + msg, file=sys.stderr)
    return code


def _parse_args(args: list[str]) -> Options | int:
    """Returns Options, or an exit code when the run should stop here."""
    opts = Options()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--help", "-h"):
            print(USAGE, end="")
            return EXIT_OK
        if arg in ("--verbose", "-v"):
            opts.verbose = True
            i += 1
            continue
        if arg in ("--elements", "--log-file"):
            if i + 1 >= len(args):
                return _fail(arg + " requires a value", EXIT_USAGE)
            value = args[i + 1]
            i += 2
            if arg == "--log-file":
                opts.log_file = value
            elif value in ELEMENT_TYPES:
                opts.element_type = value
            else:
                return _fail("unknown element type '" + value + "'", EXIT_USAGE)
            continue
        if arg.startswith("-"):
            return _fail("unknown flag '" + arg + "'", EXIT_USAGE)
        if opts.filepath != "":
            return _fail("unexpected argument '" + arg + "'", EXIT_USAGE)
        opts.filepath = arg
        i += 1
    if opts.filepath == "":
        return _fail("missing file argument", EXIT_USAGE)
    return opts


def _read_source(filepath: str) -> str | int:
    """Returns the decoded script, or an exit code on failure."""
    try:
        with open(filepath, "rb") as f:
            raw = f.read()
    except FileNotFoundError:
        return _fail(filepath + ": No such file or directory", EXIT_ERROR)
    except OSError as e:
        return _fail(filepath + ": " + str(e), EXIT_ERROR)
    try:
        return raw.decode("utf-8")
    except ValueError:
        return _fail(filepath + ": invalid utf-8", EXIT_ERROR)


def main(argv: list[str] | None = None) -> int:
    opts = _parse_args(argv if argv is not None else sys.argv[1:])
    if isinstance(opts, int):
        return opts

    # Without --verbose only genuine errors reach stderr next to script output.
    setup_logging(logging.DEBUG if opts.verbose else logging.ERROR, opts.log_file)

    source = _read_source(opts.filepath)
    if isinstance(source, int):
        return source
    try:
        script = parse(source, opts.element_type)
    except ParseError as e:
        return _fail("parse error: " + str(e), EXIT_ERROR)

    result = run(script)
    sys.stdout.write(result.stdout)
    sys.stderr.write(result.stderr)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
