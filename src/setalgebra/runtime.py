"""Script runtime: register definitions, then evaluate commands in order.

A failing command writes a diagnostic to stderr and evaluation moves on to
the next command; only collection errors are recovered this way.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .ast import (
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
from .collection import DataSetCollection, SetCollectionError
from .dataset import DataSet

logger = logging.getLogger(__name__)

YES = "Yes ✅"
NO = "No ❌"


@dataclass
class RunResult:
    exit_code: int
    stdout: str
    stderr: str


class Runtime:
    """Evaluates script commands against a collection."""

    def __init__(self, collection: DataSetCollection | None = None):
        self.collection: DataSetCollection = (
            collection if collection is not None else DataSetCollection()
        )
        self._out: list[str] = []
        self._err: list[str] = []

    # ── Output ───────────────────────────────────────────────

    def write(self, line: str) -> None:
        self._out.append(line + "\n")

    def error(self, line: str) -> None:
        self._err.append(line + "\n")

    def result(self) -> RunResult:
        return RunResult(0, "".join(self._out), "".join(self._err))

    # ── Evaluation ───────────────────────────────────────────

    def load(self, script: Script) -> None:
        for definition in script.definitions:
            self.collection.add_set(DataSet(definition.name, definition.elements))

    def exec_script(self, script: Script) -> None:
        self.load(script)
        for cmd in script.commands:
            self.exec_command(cmd)

    def exec_command(self, cmd: Command) -> None:
        logger.debug("line %d: %s", cmd.pos.line, type(cmd).__name__)
        if isinstance(cmd, UnknownCmd):
            self.error("Unknown operation: " + cmd.word)
            return
        if isinstance(cmd, InvalidCmd):
            self.error("Error: " + cmd.message)
            return
        if isinstance(cmd, PrintCmd):
            self.exec_print(cmd)
            return
        try:
            self.dispatch(cmd)
        except SetCollectionError as e:
            logger.debug("line %d failed: %s", cmd.pos.line, e)
            if isinstance(cmd, BinaryOpCmd):
                self.error("Error: " + str(e))
            else:
                self.error("Error during " + _command_label(cmd) + ": " + str(e))

    def exec_print(self, cmd: PrintCmd) -> None:
        if not self.collection.has_set(cmd.name):
            self.error("Set '" + cmd.name + "' not found.")
            return
        self.write(self.collection.get_set(cmd.name).to_string())

    def dispatch(self, cmd: Command) -> None:
        coll = self.collection
        if isinstance(cmd, BinaryOpCmd):
            self.write(coll.operate(cmd.left, cmd.op, cmd.right).to_string())
        elif isinstance(cmd, SizeCmd):
            size = coll.get_set(cmd.name).size()
            self.write("Size of set " + cmd.name + ": " + str(size) + " element(s)")
        elif isinstance(cmd, InsertCmd):
            coll.insert_into(cmd.name, cmd.value)
        elif isinstance(cmd, SubsetCmd):
            ok = coll.get_set(cmd.left).is_subset_of(coll.get_set(cmd.right))
            self.write(
                "Is " + cmd.left + " ⊆ " + cmd.right + "? " + (YES if ok else NO)
            )
        elif isinstance(cmd, EqualCmd):
            ok = coll.get_set(cmd.left).is_equal_to(coll.get_set(cmd.right))
            self.write(
                "Are " + cmd.left + " and " + cmd.right + " equal? "
                + (YES if ok else NO)
            )
        elif isinstance(cmd, PowerSetCmd):
            power = coll.operate_unary_set(cmd.name, "powerset")
            self.write(
                "Power set of " + cmd.name + " contains "
                + str(power.size()) + " subsets:"
            )
            for subset in power.elements():
                self.write(subset.to_string())
        elif isinstance(cmd, CartesianCmd):
            product = coll.cartesian_product(cmd.left, cmd.right)
            self.write(
                "Cartesian product " + cmd.left + " × " + cmd.right
                + " (" + str(product.size()) + " pairs):"
            )
            self.write(product.braced())
        elif isinstance(cmd, SetsCmd):
            names = coll.get_set_names()
            self.write("Sets: " + (", ".join(names) if names else "(none)"))
        else:
            raise TypeError("unhandled command: " + type(cmd).__name__)


def _command_label(cmd: Command) -> str:
    if isinstance(cmd, SizeCmd):
        return "size"
    if isinstance(cmd, InsertCmd):
        return "insert"
    if isinstance(cmd, SubsetCmd):
        return "issubset"
    if isinstance(cmd, EqualCmd):
        return "isequal"
    if isinstance(cmd, PowerSetCmd):
        return "powerset"
    if isinstance(cmd, CartesianCmd):
        return "cartesian product"
    return type(cmd).__name__


def run(script: Script, collection: DataSetCollection | None = None) -> RunResult:
    """Evaluate a parsed script and capture its output."""
    rt = Runtime(collection)
    rt.exec_script(script)
    return rt.result()
