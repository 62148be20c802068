"""Terminal Backend 抽象接口

定义终端自动化后端的统一接口，支持不同终端：
- iTerm2（AppleScript）
- Terminal.app（AppleScript，不支持分屏）
- tmux（POSIX shell 脚本）

设计原则：
1. 只负责把操作渲染成脚本文本，不执行
2. 引用（PaneRef）由后端映射为自己的寻址语法（变量名）
3. 脚本模板使用 Jinja2，位于 termdeck/templates/<backend>/
"""

import sys
from abc import ABC, abstractmethod
from functools import cache

from jinja2 import Environment, PackageLoader, StrictUndefined

from ..core.sanitize import escape_for_script
from ..layout.ops import PaneRef, TerminalOp


@cache
def _template_env() -> Environment:
    return Environment(
        loader=PackageLoader("termdeck", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


class TerminalBackend(ABC):
    """终端后端抽象接口

    使用示例:
        backend = ITerm2Backend()
        ops = compile_layout(layout, panes, "/path", escape=backend.escape_text)
        script = render(ops, backend)
        executor.execute(script, backend.interpreter)
    """

    # sys.platform 前缀集合
    platforms: frozenset[str] = frozenset()

    # 是否支持分屏布局
    supports_layouts: bool = True

    @property
    @abstractmethod
    def name(self) -> str:
        """后端名称（如 "iterm2", "tmux"）"""
        pass

    @property
    @abstractmethod
    def interpreter(self) -> list[str]:
        """解释器命令前缀，脚本作为最后一个参数追加"""
        pass

    def is_supported(self, platform: str | None = None) -> bool:
        """当前平台是否可用

        Args:
            platform: sys.platform 值，默认取当前进程
        """
        platform = platform or sys.platform
        return any(platform.startswith(prefix) for prefix in self.platforms)

    def escape_text(self, text: str) -> str:
        """转义要嵌入脚本字符串字面量的文本（默认 AppleScript 规则）"""
        return escape_for_script(text)

    @abstractmethod
    def ref_name(self, ref: PaneRef) -> str:
        """PaneRef → 脚本中的变量名"""
        pass

    @abstractmethod
    def render_op(self, op: TerminalOp) -> list[str]:
        """把单个操作渲染成若干行脚本"""
        pass

    @abstractmethod
    def settle_directive(self, seconds: float) -> str:
        """分屏完成后的固定等待语句"""
        pass

    def render_workspace(self, statements: list[str]) -> str:
        """用工作区模板包裹已渲染的语句"""
        return self._render("workspace", statements=statements)

    @abstractmethod
    def render_open_terminal(self) -> str:
        """打开一个空终端窗口的脚本"""
        pass

    @abstractmethod
    def render_run_command(self, project_path: str, command: str, reuse_existing: bool) -> str:
        """在项目目录中运行单条命令的脚本

        Args:
            project_path: 项目根目录
            command: 原始命令（未转义）
            reuse_existing: True 时脚本内包含"已有窗口 → 新 tab"与"新窗口"两个分支
        """
        pass

    def launch_notice(self) -> str | None:
        """脚本执行后需要告知用户的信息（如怎样找到新建的窗口），默认无"""
        return None

    def _render(self, template: str, **context) -> str:
        return _template_env().get_template(f"{self.name}/{template}.j2").render(**context)
