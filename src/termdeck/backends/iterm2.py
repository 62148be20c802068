"""iTerm2 backend - AppleScript driven through osascript."""

from .. import config
from ..core.sanitize import escape_for_script, quote_shell_single
from ..layout.ops import CreateWindow, PaneRef, SendText, SplitHorizontal, SplitVertical, TerminalOp
from .base import TerminalBackend


class ITerm2Backend(TerminalBackend):
    """iTerm2 后端

    每个 pane 的 session 保存在 AppleScript 变量 sess_<row>_<col> 中，
    分屏时通过 `set var to (split ...)` 绑定，不依赖 iTerm2 的 session 序号。
    """

    platforms = frozenset({"darwin"})

    @property
    def name(self) -> str:
        return "iterm2"

    @property
    def interpreter(self) -> list[str]:
        return [config.OSASCRIPT_BINARY, "-e"]

    def ref_name(self, ref: PaneRef) -> str:
        return f"sess_{ref.row}_{ref.col}"

    def render_op(self, op: TerminalOp) -> list[str]:
        if isinstance(op, CreateWindow):
            return [
                "set newWindow to (create window with default profile)",
                f"set {self.ref_name(op.into)} to current session of newWindow",
            ]
        if isinstance(op, (SplitHorizontal, SplitVertical)):
            direction = "horizontally" if isinstance(op, SplitHorizontal) else "vertically"
            return [
                f"tell {self.ref_name(op.source)}",
                f"    set {self.ref_name(op.into)} to (split {direction} with default profile)",
                "end tell",
            ]
        if isinstance(op, SendText):
            return [
                f"tell {self.ref_name(op.target)}",
                f'    write text "{op.text}"',
                "end tell",
            ]
        raise TypeError(f"Unknown terminal op: {op!r}")

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
