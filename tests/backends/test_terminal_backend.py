"""Tests for TerminalAppBackend"""

import pytest

from termdeck.backends.terminal import TerminalAppBackend
from termdeck.errors import PlatformUnsupported
from termdeck.layout import CreateWindow, PaneRef, compile_layout
from termdeck.models import GridLayout
from termdeck.renderer import render


@pytest.fixture
def backend():
    return TerminalAppBackend()


def test_basics(backend):
    assert backend.name == "terminal"
    assert backend.interpreter == ["osascript", "-e"]
    assert backend.supports_layouts is False
    assert backend.is_supported("darwin")
    assert not backend.is_supported("linux")


def test_render_op_is_unsupported(backend):
    with pytest.raises(PlatformUnsupported):
        backend.render_op(CreateWindow(into=PaneRef(0, 0)))


def test_panes_cannot_be_addressed(backend):
    with pytest.raises(PlatformUnsupported, match="panes cannot be addressed"):
        backend.ref_name(PaneRef(0, 0))


def test_no_launch_notice(backend):
    assert backend.launch_notice() is None


def test_workspace_render_is_unsupported(backend):
    ops = compile_layout(GridLayout(rows=1, columns=[2]), [], "/p")
    with pytest.raises(PlatformUnsupported) as exc_info:
        render(ops, backend)
    assert exc_info.value.backend == "terminal"


def test_open_terminal(backend):
    script = backend.render_open_terminal()
    assert 'tell application "Terminal"' in script
    assert 'do script ""' in script


def test_run_command_new_window(backend):
    script = backend.render_run_command("/home/u/proj", "make", reuse_existing=False)
    assert "do script \"cd '/home/u/proj' && make\"" in script
    assert "front window" not in script


def test_run_command_reuse(backend):
    script = backend.render_run_command("/home/u/proj", "make", reuse_existing=True)
    assert "if (count of windows) > 0 then" in script
    assert "do script \"cd '/home/u/proj' && make\" in front window" in script


def test_run_command_escapes_quotes(backend):
    script = backend.render_run_command("/p", 'echo "x"', reuse_existing=False)
    assert "do script \"cd '/p' && echo \\\"x\\\"\"" in script
