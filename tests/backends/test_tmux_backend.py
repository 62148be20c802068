"""Tests for TmuxBackend"""

import shlex

import pytest

from termdeck.backends.tmux import PANE_ID_FORMAT, TmuxBackend
from termdeck.layout import (
    CreateWindow,
    PaneRef,
    SendText,
    SplitHorizontal,
    SplitVertical,
    compile_layout,
)
from termdeck.models import GridLayout, PaneConfig
from termdeck.renderer import render


@pytest.fixture
def backend():
    return TmuxBackend()


class TestTmuxBackendBasics:
    """Test basic TmuxBackend properties"""

    def test_name(self, backend):
        assert backend.name == "tmux"

    def test_interpreter(self, backend):
        assert backend.interpreter == ["sh", "-c"]

    def test_platforms(self, backend):
        assert backend.is_supported("linux")
        assert backend.is_supported("darwin")
        assert backend.is_supported("freebsd14")
        assert not backend.is_supported("win32")

    def test_escape_text_is_identity(self, backend):
        assert backend.escape_text('a "b" \\c') == 'a "b" \\c'

    def test_ref_name(self, backend):
        assert backend.ref_name(PaneRef(2, 1)) == "p_2_1"

    def test_default_socket(self, backend):
        assert backend.tmux == "tmux"

    def test_custom_socket(self):
        backend = TmuxBackend(socket_path="/tmp/my sock")
        assert backend.tmux == "tmux -S '/tmp/my sock'"


class TestTmuxRenderOp:
    """Test per-op rendering"""

    def test_create_window(self, backend):
        assert backend.render_op(CreateWindow(into=PaneRef(0, 0))) == ["p_0_0=$(tmux_new_window)"]

    def test_split_horizontal_stacks_vertically(self, backend):
        [line] = backend.render_op(SplitHorizontal(source=PaneRef(0, 0), into=PaneRef(1, 0)))
        assert line == f'p_1_0=$(tmux split-window -v -t "$p_0_0" {PANE_ID_FORMAT})'

    def test_split_vertical_places_side_by_side(self, backend):
        [line] = backend.render_op(SplitVertical(source=PaneRef(1, 0), into=PaneRef(1, 1)))
        assert line == f'p_1_1=$(tmux split-window -h -t "$p_1_0" {PANE_ID_FORMAT})'

    def test_send_text_is_literal(self, backend):
        text_line, enter_line = backend.render_op(SendText(target=PaneRef(0, 1), text="echo $HOME 'x'"))

        assert shlex.split(text_line) == ["tmux", "send-keys", "-t", "$p_0_1", "-l", "echo $HOME 'x'"]
        assert shlex.split(enter_line) == ["tmux", "send-keys", "-t", "$p_0_1", "Enter"]

    def test_socket_is_used_for_every_command(self):
        backend = TmuxBackend(socket_path="/tmp/s")
        [line] = backend.render_op(SplitVertical(source=PaneRef(0, 0), into=PaneRef(0, 1)))
        assert "tmux -S /tmp/s split-window" in line

    def test_unknown_op(self, backend):
        with pytest.raises(TypeError):
            backend.render_op("split")

    def test_settle_directive(self, backend):
        assert backend.settle_directive(0.3) == "sleep 0.3"


class TestTmuxWorkspace:
    """Test full workspace scripts"""

    def test_workspace_script_order(self, backend):
        panes = [PaneConfig((0, 0), "api", "make run")]
        ops = compile_layout(
            GridLayout(rows=2, columns=[2, 1]), panes, "/srv/app", escape=backend.escape_text
        )
        lines = render(ops, backend).splitlines()

        assert lines[0] == "set -e"
        assert "tmux_new_window() {" in lines
        body = lines[lines.index("}") + 1 :]
        assert body[0] == "p_0_0=$(tmux_new_window)"
        assert body[1].startswith('p_1_0=$(tmux split-window -v -t "$p_0_0"')
        assert body[2].startswith('p_0_1=$(tmux split-window -h -t "$p_0_0"')
        assert body[3] == "sleep 0.3"
        assert shlex.split(body[4])[-1] == "cd '/srv/app/api'"
        assert shlex.split(body[6])[-1] == "make run"

    def test_prelude_handles_inside_and_outside_tmux(self, backend):
        ops = compile_layout(GridLayout(rows=1, columns=[1]), [], "/p", escape=backend.escape_text)
        script = render(ops, backend)

        assert 'if [ -n "${TMUX:-}" ]; then' in script
        assert f"tmux new-window {PANE_ID_FORMAT}" in script
        assert f"tmux new-session -d {PANE_ID_FORMAT}" in script

    def test_raw_text_survives_shell_quoting(self, backend):
        panes = [PaneConfig((0, 0), "it's here", 'echo "a\\b"')]
        ops = compile_layout(GridLayout(rows=1, columns=[1]), panes, "/p", escape=backend.escape_text)
        script = render(ops, backend)

        literals = [
            shlex.split(line)[-1]
            for line in script.splitlines()
            if line.startswith("tmux send-keys") and " -l " in line
        ]
        assert literals == ["cd '/p/it'\\''s here'", 'echo "a\\b"']


class TestTmuxTemplates:
    """Test open-terminal and run-command templates"""

    def test_open_terminal(self, backend):
        script = backend.render_open_terminal()
        assert script.startswith("set -e\n")
        assert "tmux_new_window >/dev/null" in script

    def test_run_command_new_window(self, backend):
        script = backend.render_run_command("/home/u/proj", "npm test", reuse_existing=False)
        lines = script.splitlines()

        assert "pane=$(tmux_new_window)" in lines
        assert "has-session" not in script
        sent = [shlex.split(line)[-1] for line in lines if " -l " in line]
        assert sent == ["cd '/home/u/proj'", "npm test"]

    def test_run_command_reuse_checks_session_in_script(self, backend):
        script = backend.render_run_command("/home/u/proj", "npm test", reuse_existing=True)

        assert "if tmux has-session 2>/dev/null; then" in script
        assert f"pane=$(tmux new-window {PANE_ID_FORMAT})" in script
        assert f"pane=$(tmux new-session -d {PANE_ID_FORMAT})" in script


class TestTmuxLaunchNotice:
    """Test the attach hint for detached sessions"""

    def test_outside_tmux(self, monkeypatch):
        monkeypatch.delenv("TMUX", raising=False)
        assert TmuxBackend().launch_notice() == "tmux session created detached, attach with: tmux attach"

    def test_outside_tmux_with_socket(self, monkeypatch):
        monkeypatch.delenv("TMUX", raising=False)
        notice = TmuxBackend(socket_path="/tmp/s").launch_notice()
        assert notice.endswith("tmux -S /tmp/s attach")

    def test_inside_tmux(self, monkeypatch):
        monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1,0")
        assert TmuxBackend().launch_notice() is None
