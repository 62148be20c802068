"""项目 / 设置数据源

核心逻辑只依赖两个只读协议：
- ProjectSource.load_project(id) -> Project（不存在时抛出 NotFound）
- SettingsSource.load_settings() -> LaunchSettings（永不失败，出错回退默认值）

提供两个实现：
- InMemoryStore: 内存数据（嵌入调用方 / 测试）
- TomlStore: 只读加载 <config_dir>/config.toml 与 <config_dir>/projects/*.toml
"""

import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from . import config
from .errors import InvalidLayout, NotFound
from .models import LaunchSettings, Project
from .telemetry import get_logger

logger = get_logger(__name__)


class ProjectSource(Protocol):
    def load_project(self, project_id: str) -> Project: ...


class SettingsSource(Protocol):
    def load_settings(self) -> LaunchSettings: ...


class InMemoryStore:
    """内存数据源"""

    def __init__(
        self,
        projects: Iterable[Project] = (),
        settings: LaunchSettings | None = None,
    ):
        self._projects = {project.id: project for project in projects}
        self._settings = settings or LaunchSettings()

    def load_project(self, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise NotFound("project", project_id)
        return project

    def load_settings(self) -> LaunchSettings:
        return self._settings


class TomlStore:
    """TOML 文件数据源（只读）

    每次调用都重新读取文件，不做缓存。
    """

    def __init__(self, config_dir: Path | str | None = None):
        self._config_dir = Path(config_dir) if config_dir else config.CONFIG_DIR

    @property
    def settings_file(self) -> Path:
        return self._config_dir / config.SETTINGS_FILE_NAME

    @property
    def projects_dir(self) -> Path:
        return self._config_dir / config.PROJECTS_DIR_NAME

    def load_settings(self) -> LaunchSettings:
        """加载设置，文件缺失或损坏时返回默认值"""
        path = self.settings_file
        if not path.exists():
            logger.info(f"Settings file not found, using defaults: {path}")
            return LaunchSettings()

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error(f"Failed to read settings {path}: {e}; using defaults")
            return LaunchSettings()

        settings = LaunchSettings.from_dict(data)
        logger.info(
            f"Settings loaded: terminal={settings.backend.value}, reuse={settings.reuse_existing}"
        )
        return settings

    def load_projects(self) -> list[Project]:
        """加载全部项目，损坏的文件记录日志后跳过

        Returns:
            按最近打开时间倒序排列的项目列表
        """
        if not self.projects_dir.is_dir():
            return []

        projects = []
        for path in sorted(self.projects_dir.glob("*.toml")):
            try:
                with open(path, "rb") as f:
                    data = tomllib.load(f)
                project = Project.from_dict(data)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error(f"Failed to read project file {path}: {e}")
                continue
            except (KeyError, TypeError, ValueError, InvalidLayout) as e:
                logger.error(f"Failed to parse project file {path}: {e}")
                continue
            logger.debug(f"Loaded project: {project.name} ({project.id})")
            projects.append(project)

        projects.sort(key=lambda p: p.last_opened or "", reverse=True)
        logger.info(f"Loaded {len(projects)} projects from {self.projects_dir}")
        return projects

    def load_project(self, project_id: str) -> Project:
        for project in self.load_projects():
            if project.id == project_id:
                return project
        raise NotFound("project", project_id)
