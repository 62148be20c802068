"""Layout compiler

Converts a GridLayout plus sparse PaneConfig entries into an ordered list of
terminal operations.

Split order:
1. CreateWindow binds R(0,0).
2. Row r is created by splitting R(r-1,0) horizontally. Splitting the first
   column of the previous row (rather than the last created pane) appends
   every new row below all existing rows, independent of how many columns
   those rows later get.
3. Column c of row r is created by splitting R(r,c-1) vertically, so columns
   are appended left to right.
4. Each cell in row-major order gets a `cd` line and, if configured, its
   command line.

Only cells implied by the layout are visited; configs are looked up by
position, so out-of-range or duplicate entries are ignored.
"""

from collections.abc import Callable, Iterable

from ..core.sanitize import escape_for_script, quote_shell_single, resolve_directory
from ..models import GridLayout, PaneConfig, Project, Workspace
from ..telemetry import get_logger
from .ops import CreateWindow, PaneRef, SendText, SplitHorizontal, SplitVertical, TerminalOp

logger = get_logger(__name__)


def _index_panes(panes: Iterable[PaneConfig]) -> dict[tuple[int, int], PaneConfig]:
    index: dict[tuple[int, int], PaneConfig] = {}
    for pane in panes:
        index.setdefault(tuple(pane.position), pane)
    return index


def compile_layout(
    layout: GridLayout,
    panes: Iterable[PaneConfig],
    project_root: str,
    escape: Callable[[str], str] = escape_for_script,
) -> list[TerminalOp]:
    """Compile a grid layout into terminal operations.

    Args:
        layout: Grid description
        panes: Sparse pane configs keyed by position
        project_root: Root used to resolve relative pane directories
        escape: Literal escaping of the target script language

    Returns:
        Ordered operation list

    Raises:
        InvalidLayout: If the layout fails validation
    """
    layout.validate()
    configs = _index_panes(panes)

    ops: list[TerminalOp] = [CreateWindow(into=PaneRef(0, 0))]

    for row in range(1, layout.rows):
        ops.append(SplitHorizontal(source=PaneRef(row - 1, 0), into=PaneRef(row, 0)))

    for row in range(layout.rows):
        for col in range(1, layout.columns[row]):
            ops.append(SplitVertical(source=PaneRef(row, col - 1), into=PaneRef(row, col)))

    for row, col in layout.cells():
        ref = PaneRef(row, col)
        pane = configs.get((row, col))
        directory = resolve_directory(project_root, pane.directory if pane else ".")
        ops.append(SendText(target=ref, text=f"cd '{escape(quote_shell_single(directory))}'"))
        if pane and pane.command:
            ops.append(SendText(target=ref, text=escape(pane.command)))

    logger.debug(
        f"Compiled {layout.rows} rows / {layout.total_panes} panes into {len(ops)} ops"
    )
    return ops


def compile_workspace(
    workspace: Workspace,
    project: Project,
    escape: Callable[[str], str] = escape_for_script,
) -> list[TerminalOp]:
    """Compile a workspace against its project's root path."""
    return compile_layout(workspace.layout, workspace.panes, project.path, escape=escape)
