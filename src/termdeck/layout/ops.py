"""Abstract terminal operations produced by the layout compiler.

A compiled workspace is an ordered list of these operations. Panes are
addressed through PaneRef handles bound when the pane is created, never by
the position index the terminal assigns after a split.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PaneRef:
    """Stable handle for a pane created during one compilation."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"R({self.row},{self.col})"


@dataclass(frozen=True)
class CreateWindow:
    """Open a new window whose initial pane is bound to `into`."""

    into: PaneRef


@dataclass(frozen=True)
class SplitHorizontal:
    """Split `source` with a horizontal divider; the new pane appears below."""

    source: PaneRef
    into: PaneRef


@dataclass(frozen=True)
class SplitVertical:
    """Split `source` with a vertical divider; the new pane appears to the right."""

    source: PaneRef
    into: PaneRef


@dataclass(frozen=True)
class SendText:
    """Type a line of already-escaped text into `target`."""

    target: PaneRef
    text: str


TerminalOp = Union[CreateWindow, SplitHorizontal, SplitVertical, SendText]

STRUCTURAL_OPS = (CreateWindow, SplitHorizontal, SplitVertical)


def check_references(ops: list[TerminalOp]) -> None:
    """Verify every ref is produced exactly once before it is read.

    Raises:
        ValueError: On a ref read before creation or created twice
    """
    produced: set[PaneRef] = set()
    for index, op in enumerate(ops):
        if isinstance(op, SendText):
            reads = [op.target]
        elif isinstance(op, CreateWindow):
            reads = []
        else:
            reads = [op.source]

        for ref in reads:
            if ref not in produced:
                raise ValueError(f"op #{index} reads {ref} before it is created")

        if isinstance(op, STRUCTURAL_OPS):
            if op.into in produced:
                raise ValueError(f"op #{index} creates {op.into} twice")
            produced.add(op.into)
