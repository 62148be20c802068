"""Layout 模块

- ops: 抽象终端操作（CreateWindow / SplitHorizontal / SplitVertical / SendText）
- compiler: 网格布局 → 有序操作列表
"""

from .compiler import compile_layout, compile_workspace
from .ops import (
    STRUCTURAL_OPS,
    CreateWindow,
    PaneRef,
    SendText,
    SplitHorizontal,
    SplitVertical,
    TerminalOp,
    check_references,
)

__all__ = [
    "compile_layout",
    "compile_workspace",
    "PaneRef",
    "CreateWindow",
    "SplitHorizontal",
    "SplitVertical",
    "SendText",
    "TerminalOp",
    "STRUCTURAL_OPS",
    "check_references",
]
