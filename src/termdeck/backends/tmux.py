"""Tmux backend - POSIX shell script of tmux commands run through `sh -c`."""

import os
import shlex

from .. import config
from ..core.sanitize import quote_shell_single
from ..layout.ops import CreateWindow, PaneRef, SendText, SplitHorizontal, SplitVertical, TerminalOp
from .base import TerminalBackend

# Print the new pane id so it can be captured into a shell variable
PANE_ID_FORMAT = "-P -F '#{pane_id}'"


class TmuxBackend(TerminalBackend):
    """Tmux backend.

    Pane ids returned by tmux (e.g. "%3") are captured into shell variables
    p_<row>_<col> at creation time and used as split/send-keys targets.
    Literal text goes through `send-keys -l` and is shell-quoted at render
    time, so the compiler's escape hook is the identity here.

    Outside $TMUX new windows go into a detached `new-session -d` that no
    client shows yet; launch_notice tells the user how to attach.
    """

    platforms = frozenset({"darwin", "linux", "freebsd", "openbsd", "netbsd"})

    def __init__(self, socket_path: str | None = None):
        """Initialize TmuxBackend.

        Args:
            socket_path: Optional tmux socket path. If None, uses default socket.
        """
        self._socket_path = socket_path

    @property
    def name(self) -> str:
        return "tmux"

    @property
    def interpreter(self) -> list[str]:
        return [config.SHELL_BINARY, "-c"]

    @property
    def tmux(self) -> str:
        """tmux invocation prefix, including the socket if configured."""
        if self._socket_path:
            return f"tmux -S {shlex.quote(self._socket_path)}"
        return "tmux"

    def escape_text(self, text: str) -> str:
        return text

    def launch_notice(self) -> str | None:
        # the interpreter inherits this environment, so $TMUX decides the branch taken
        if os.environ.get("TMUX"):
            return None
        return f"tmux session created detached, attach with: {self.tmux} attach"

    def ref_name(self, ref: PaneRef) -> str:
        return f"p_{ref.row}_{ref.col}"

    def render_op(self, op: TerminalOp) -> list[str]:
        if isinstance(op, CreateWindow):
            return [f"{self.ref_name(op.into)}=$(tmux_new_window)"]
        if isinstance(op, (SplitHorizontal, SplitVertical)):
            # tmux -v stacks panes top/bottom, -h places them side by side
            flag = "-v" if isinstance(op, SplitHorizontal) else "-h"
            source = self.ref_name(op.source)
            return [
                f'{self.ref_name(op.into)}=$({self.tmux} split-window {flag} -t "${source}" {PANE_ID_FORMAT})'
            ]
        if isinstance(op, SendText):
            target = self.ref_name(op.target)
            return [
                f'{self.tmux} send-keys -t "${target}" -l {shlex.quote(op.text)}',
                f'{self.tmux} send-keys -t "${target}" Enter',
            ]
        raise TypeError(f"Unknown terminal op: {op!r}")

    def settle_directive(self, seconds: float) -> str:
        return f"sleep {seconds:g}"

    def render_workspace(self, statements: list[str]) -> str:
        return self._render("workspace", statements=statements, tmux=self.tmux, pane_id_format=PANE_ID_FORMAT)

    def render_open_terminal(self) -> str:
        return self._render("open_terminal", tmux=self.tmux, pane_id_format=PANE_ID_FORMAT)

    def render_run_command(self, project_path: str, command: str, reuse_existing: bool) -> str:
        return self._render(
            "run_command",
            tmux=self.tmux,
            pane_id_format=PANE_ID_FORMAT,
            cd_line=shlex.quote(f"cd '{quote_shell_single(project_path)}'"),
            command=shlex.quote(command),
            reuse_existing=reuse_existing,
        )
