"""Script renderer

Serializes a compiled operation list into backend script text. Statement
order is preserved exactly: the automation runtime executes top to bottom and
any reordering changes which pane ends up where.
"""

import sys

from . import config
from .backends.base import TerminalBackend
from .errors import PlatformUnsupported
from .layout.ops import SendText, TerminalOp, check_references
from .telemetry import get_logger

logger = get_logger(__name__)


def render(
    ops: list[TerminalOp],
    backend: TerminalBackend,
    settle_seconds: float = config.SPLIT_SETTLE_SECONDS,
) -> str:
    """Render operations into a complete automation script.

    The settle directive is emitted once, after the last structural op and
    before the first SendText, to give the terminal time to finish creating
    panes.

    Args:
        ops: Output of the layout compiler
        backend: Target backend
        settle_seconds: Delay before pane configuration starts

    Returns:
        Script text

    Raises:
        PlatformUnsupported: If the backend cannot split panes
        ValueError: If a pane reference is used before it is created
    """
    if not backend.supports_layouts:
        raise PlatformUnsupported(backend.name, sys.platform, "split panes are not scriptable")

    check_references(ops)

    statements: list[str] = []
    settled = False
    for op in ops:
        if isinstance(op, SendText) and not settled:
            statements.append(backend.settle_directive(settle_seconds))
            settled = True
        statements.extend(backend.render_op(op))

    script = backend.render_workspace(statements)
    logger.debug(f"Rendered {len(ops)} ops for {backend.name} ({len(script)} chars)")
    return script
