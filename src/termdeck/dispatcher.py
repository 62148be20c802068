"""Command dispatcher

Entry points used by the caller (web/CLI layer):
- launch_workspace: compile → render → execute a grid workspace
- open_terminal: fixed template, always a new window
- run_command: one pane in the project root; with reuse enabled the script
  itself decides between a new tab and a new window, since only the
  terminal's own runtime knows whether a window exists

Settings and project data are read fresh on every call.
"""

from .backends.base import TerminalBackend
from .backends.factory import select_backend
from .errors import NotFound
from .executor import AutomationExecutor
from .layout.compiler import compile_workspace
from .renderer import render
from .store import ProjectSource, SettingsSource
from .telemetry import get_logger, metrics, redact_command

logger = get_logger(__name__)


class CommandDispatcher:
    """把用户设置应用到三个入口上，并调用编译/渲染/执行流水线"""

    def __init__(
        self,
        projects: ProjectSource,
        settings: SettingsSource,
        executor: AutomationExecutor | None = None,
        platform: str | None = None,
    ):
        """初始化

        Args:
            projects: 项目数据源
            settings: 设置数据源
            executor: 脚本执行器，默认新建
            platform: 覆盖 sys.platform（用于测试）
        """
        self._projects = projects
        self._settings = settings
        self._executor = executor or AutomationExecutor()
        self._platform = platform

    def _execute(self, script: str, backend: TerminalBackend) -> None:
        self._executor.execute(script, backend.interpreter)
        notice = backend.launch_notice()
        if notice:
            logger.info(notice)

    def launch_workspace(self, project_id: str, workspace_id: str) -> None:
        """启动工作区

        Raises:
            PlatformUnsupported: 后端在当前平台不可用
            NotFound: 项目或工作区不存在
            InvalidLayout: 布局不合法
            AutomationError: 脚本执行失败
        """
        logger.info(f"Launching workspace {workspace_id} for project {project_id}")
        settings = self._settings.load_settings()
        backend = select_backend(settings, platform=self._platform, require_layouts=True)

        project = self._projects.load_project(project_id)
        workspace = project.workspace(workspace_id)
        if workspace is None:
            raise NotFound("workspace", workspace_id)

        logger.info(
            f"Found workspace: {workspace.name} with {len(workspace.panes)} panes "
            f"({workspace.layout.rows} rows), backend={backend.name}"
        )
        ops = compile_workspace(workspace, project, escape=backend.escape_text)
        metrics.gauge("workspace.panes", workspace.layout.total_panes, {"backend": backend.name})
        script = render(ops, backend)
        self._execute(script, backend)

        metrics.inc("dispatch.launch_workspace", {"backend": backend.name})
        logger.info(f"Workspace {workspace.name} launched")

    def open_terminal(self) -> None:
        """打开一个新终端窗口（忽略 reuse 设置）"""
        settings = self._settings.load_settings()
        backend = select_backend(settings, platform=self._platform)
        logger.info(f"Opening new terminal window with {backend.name}")

        self._execute(backend.render_open_terminal(), backend)

        metrics.inc("dispatch.open_terminal", {"backend": backend.name})

    def run_command(self, project_id: str, command: str) -> None:
        """在项目目录中运行一条命令

        Raises:
            PlatformUnsupported: 后端在当前平台不可用
            NotFound: 项目不存在
            AutomationError: 脚本执行失败
        """
        logger.info(f"Running command '{redact_command(command)}' for project {project_id}")
        settings = self._settings.load_settings()
        backend = select_backend(settings, platform=self._platform)

        project = self._projects.load_project(project_id)
        logger.info(
            f"Found project at path: {project.path}, backend={backend.name}, "
            f"reuse_existing={settings.reuse_existing}"
        )
        script = backend.render_run_command(project.path, command, settings.reuse_existing)
        self._execute(script, backend)

        metrics.inc("dispatch.run_command", {"backend": backend.name})
