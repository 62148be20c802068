"""Backend factory for creating terminal backends."""

import os
import sys

from termdeck import config
from termdeck.errors import PlatformUnsupported
from termdeck.models import BackendKind, LaunchSettings
from termdeck.telemetry import get_logger

from .base import TerminalBackend

logger = get_logger(__name__)


def detect_backend_kind(platform: str | None = None) -> BackendKind:
    """Detect the most suitable backend from the environment.

    Returns:
        tmux if $TMUX is set or the platform is not macOS, otherwise iTerm2
    """
    platform = platform or sys.platform
    if os.environ.get("TMUX"):
        return BackendKind.TMUX
    if platform.startswith("darwin"):
        return BackendKind.ITERM2
    return BackendKind.TMUX


def create_backend(
    kind: BackendKind | str | None = None,
    socket_path: str | None = None,
) -> TerminalBackend:
    """Create a terminal backend.

    Args:
        kind: Backend kind ("iterm2", "terminal", "tmux", "auto").
              Default from config.
        socket_path: Tmux socket path (optional, tmux only). Default from config.

    Returns:
        TerminalBackend instance

    Raises:
        ValueError: If the backend kind is unknown
    """
    if kind is None:
        kind = config.DEFAULT_TERMINAL
    if isinstance(kind, BackendKind):
        kind = kind.value

    if kind == "auto":
        kind = detect_backend_kind().value
        logger.info(f"Auto-detected terminal backend: {kind}")

    if kind == "iterm2":
        from termdeck.backends.iterm2 import ITerm2Backend

        return ITerm2Backend()

    if kind == "terminal":
        from termdeck.backends.terminal import TerminalAppBackend

        return TerminalAppBackend()

    if kind == "tmux":
        from termdeck.backends.tmux import TmuxBackend

        return TmuxBackend(socket_path=socket_path or config.TMUX_SOCKET_PATH)

    raise ValueError(f"Unknown backend type: {kind}")


def select_backend(
    settings: LaunchSettings,
    platform: str | None = None,
    require_layouts: bool = False,
) -> TerminalBackend:
    """Pick the backend for one dispatch from the user's settings.

    A backend without split support cannot launch a workspace; in that case
    the iTerm2 backend is used instead.

    Args:
        settings: Launch settings
        platform: sys.platform value, defaults to the running interpreter
        require_layouts: Whether the caller needs split-pane support

    Raises:
        PlatformUnsupported: If the selected backend cannot run here
    """
    platform = platform or sys.platform
    kind = settings.backend
    if kind == BackendKind.AUTO:
        kind = detect_backend_kind(platform)
    backend = create_backend(kind)

    if require_layouts and not backend.supports_layouts:
        logger.warning(
            f"Backend '{backend.name}' cannot split panes, launching workspace with iterm2"
        )
        backend = create_backend(BackendKind.ITERM2)

    if not backend.is_supported(platform):
        raise PlatformUnsupported(backend.name, platform)
    return backend
