"""Terminal.app backend - AppleScript driven through osascript.

Terminal.app exposes no split-pane scripting, so it only renders the
single-window templates.
"""

import sys

from .. import config
from ..core.sanitize import escape_for_script, quote_shell_single
from ..errors import PlatformUnsupported
from ..layout.ops import PaneRef, TerminalOp
from .base import TerminalBackend


class TerminalAppBackend(TerminalBackend):
    """macOS Terminal.app 后端"""

    platforms = frozenset({"darwin"})
    supports_layouts = False

    @property
    def name(self) -> str:
        return "terminal"

    @property
    def interpreter(self) -> list[str]:
        return [config.OSASCRIPT_BINARY, "-e"]

    def ref_name(self, ref: PaneRef) -> str:
        raise PlatformUnsupported(self.name, sys.platform, "panes cannot be addressed")

    def render_op(self, op: TerminalOp) -> list[str]:
        raise PlatformUnsupported(self.name, sys.platform, "split panes are not scriptable")

    def settle_directive(self, seconds: float) -> str:
        return f"delay {seconds:g}"

    def render_open_terminal(self) -> str:
        return self._render("open_terminal")

    def render_run_command(self, project_path: str, command: str, reuse_existing: bool) -> str:
        return self._render(
            "run_command",
            path=escape_for_script(quote_shell_single(project_path)),
            command=escape_for_script(command),
            reuse_existing=reuse_existing,
        )
