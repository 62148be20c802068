"""Terminal Backends 模块

提供终端后端接口与实现：
- TerminalBackend: 后端抽象接口
- ITerm2Backend / TerminalAppBackend / TmuxBackend: 具体后端
- create_backend / select_backend: 后端工厂
"""

from .base import TerminalBackend
from .factory import create_backend, detect_backend_kind, select_backend
from .iterm2 import ITerm2Backend
from .terminal import TerminalAppBackend
from .tmux import TmuxBackend

__all__ = [
    # Interface
    "TerminalBackend",
    # Backends
    "ITerm2Backend",
    "TerminalAppBackend",
    "TmuxBackend",
    # Factory
    "create_backend",
    "detect_backend_kind",
    "select_backend",
]
