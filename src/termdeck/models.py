"""termdeck 数据模型

包含：
- GridLayout: 网格布局（行数 + 每行列数）
- PaneConfig: 单个 pane 的目录/命令配置（按网格位置稀疏存放）
- Workspace / Project: 外部存储提供的只读数据
- BackendKind / LaunchSettings: 用户设置
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from . import config
from .errors import InvalidLayout
from .telemetry import get_logger

logger = get_logger(__name__)


def _pick(data: dict, *keys: str, default: Any = None) -> Any:
    """按顺序取第一个存在的键（兼容 camelCase / snake_case）"""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _expect(value: Any, types: type | tuple[type, ...], name: str) -> Any:
    """类型不符时抛出 TypeError（由调用方记录日志并跳过）"""
    if not isinstance(value, types) or isinstance(value, bool):
        raise TypeError(f"{name} has unexpected type {type(value).__name__}")
    return value


@dataclass
class GridLayout:
    """网格布局

    Attributes:
        rows: 行数（>= 1）
        columns: 每行的列数，长度必须等于 rows，每项 >= 1
    """

    rows: int
    columns: list[int] = field(default_factory=list)

    def validate(self) -> None:
        """校验布局，失败抛出 InvalidLayout"""
        if isinstance(self.rows, bool) or not isinstance(self.rows, int) or self.rows < 1:
            raise InvalidLayout(f"Layout must have at least one row, got {self.rows!r}")
        if len(self.columns) != self.rows:
            raise InvalidLayout(
                f"Layout declares {self.rows} rows but has {len(self.columns)} column counts"
            )
        for row, count in enumerate(self.columns):
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise InvalidLayout(f"Row {row} must have at least one column, got {count!r}")

    @property
    def total_panes(self) -> int:
        return sum(self.columns)

    def cells(self) -> list[tuple[int, int]]:
        """按行优先顺序返回所有网格位置"""
        return [(row, col) for row in range(self.rows) for col in range(self.columns[row])]

    @classmethod
    def from_dict(cls, data: dict) -> "GridLayout":
        try:
            layout = cls(rows=data["rows"], columns=list(data["columns"]))
        except (KeyError, TypeError) as e:
            raise InvalidLayout(f"Malformed layout: {e}") from e
        layout.validate()
        return layout


@dataclass
class PaneConfig:
    """Pane 配置

    position 以 (row, col) 表示；目录可以是相对路径（相对项目根目录）或绝对路径。
    """

    position: tuple[int, int]
    directory: str = "."
    command: str | None = None
    environment_overrides: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "PaneConfig":
        _expect(data, dict, "pane")
        row, col = data["position"]
        return cls(
            position=(_expect(row, int, "position row"), _expect(col, int, "position column")),
            directory=_expect(data.get("directory") or ".", str, "directory"),
            command=_expect(data.get("command"), (str, type(None)), "command"),
            environment_overrides=_expect(
                _pick(data, "environmentVariables", "environment_variables"),
                (dict, type(None)),
                "environment variables",
            ),
        )


@dataclass
class Workspace:
    """工作区：一个网格布局 + 稀疏的 pane 配置"""

    id: str
    name: str
    layout: GridLayout
    panes: list[PaneConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Workspace":
        _expect(data, dict, "workspace")
        panes = []
        for raw in _expect(data.get("panes", []), list, "panes"):
            try:
                panes.append(PaneConfig.from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed pane in workspace {data.get('id')!r}: {e}")
        return cls(
            id=_expect(data["id"], str, "workspace id"),
            name=_expect(data["name"], str, "workspace name"),
            layout=GridLayout.from_dict(data["layout"]),
            panes=panes,
        )


@dataclass
class Project:
    """项目（只使用 id 与 path，其余字段仅透传）"""

    id: str
    name: str
    path: str
    description: str | None = None
    tags: list[str] = field(default_factory=list)
    workspaces: list[Workspace] = field(default_factory=list)
    last_opened: str | None = None

    def workspace(self, workspace_id: str) -> Workspace | None:
        for workspace in self.workspaces:
            if workspace.id == workspace_id:
                return workspace
        return None

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        _expect(data, dict, "project")
        workspaces = []
        for raw in _expect(data.get("workspaces", []), list, "workspaces"):
            try:
                workspaces.append(Workspace.from_dict(raw))
            except (KeyError, TypeError, InvalidLayout) as e:
                logger.warning(f"Skipping malformed workspace in project {data.get('id')!r}: {e}")
        return cls(
            id=_expect(data["id"], str, "project id"),
            name=_expect(data["name"], str, "project name"),
            path=_expect(data["path"], str, "project path"),
            description=_expect(data.get("description"), (str, type(None)), "description"),
            tags=list(_expect(data.get("tags", []), list, "tags")),
            workspaces=workspaces,
            last_opened=_expect(
                _pick(data, "lastOpened", "last_opened"), (str, type(None)), "last opened"
            ),
        )


class BackendKind(Enum):
    """终端自动化后端"""

    ITERM2 = "iterm2"
    TERMINAL = "terminal"
    TMUX = "tmux"
    AUTO = "auto"

    @classmethod
    def parse(cls, value: str | None) -> "BackendKind":
        """解析设置中的终端名称，未知值回退到 iTerm2"""
        if value is not None and not isinstance(value, str):
            logger.warning(f"Terminal setting {value!r} is not a name, falling back to iterm2")
            return cls.ITERM2
        if not value:
            return cls(config.DEFAULT_TERMINAL)
        try:
            return cls(value.lower())
        except ValueError:
            logger.warning(f"Unknown terminal '{value}', falling back to iterm2")
            return cls.ITERM2


@dataclass(frozen=True)
class LaunchSettings:
    """启动设置（由外部设置存储提供，只读）"""

    backend: BackendKind = BackendKind.ITERM2
    reuse_existing: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "LaunchSettings":
        terminal = _pick(data, "defaultTerminal", "default_terminal")
        behavior = _pick(
            data, "terminalBehavior", "terminal_behavior", default=config.DEFAULT_TERMINAL_BEHAVIOR
        )
        return cls(
            backend=BackendKind.parse(terminal),
            reuse_existing=behavior == config.REUSE_BEHAVIOR,
        )
