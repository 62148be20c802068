"""termdeck - launch grid workspaces of terminal panes through terminal automation."""

from termdeck.dispatcher import CommandDispatcher
from termdeck.errors import (
    AutomationError,
    AutomationTimeout,
    InvalidLayout,
    LaunchFailed,
    NotFound,
    PlatformUnsupported,
    ScriptFailed,
    TermDeckError,
)
from termdeck.models import BackendKind, GridLayout, LaunchSettings, PaneConfig, Project, Workspace

__version__ = "0.1.0"

__all__ = [
    "CommandDispatcher",
    # Models
    "GridLayout",
    "PaneConfig",
    "Workspace",
    "Project",
    "BackendKind",
    "LaunchSettings",
    # Errors
    "TermDeckError",
    "InvalidLayout",
    "NotFound",
    "PlatformUnsupported",
    "AutomationError",
    "LaunchFailed",
    "ScriptFailed",
    "AutomationTimeout",
]
