"""Pytest 配置"""

import pytest

from termdeck.executor import AutomationExecutor
from termdeck.models import GridLayout, PaneConfig, Project, Workspace
from termdeck.telemetry import metrics


class RecordingExecutor(AutomationExecutor):
    """记录脚本而不启动进程的执行器"""

    def __init__(self):
        super().__init__(timeout=None)
        self.calls: list[tuple[str, list[str]]] = []
        self.error: Exception | None = None

    def execute(self, script, interpreter):
        self.calls.append((script, list(interpreter)))
        if self.error is not None:
            raise self.error

    @property
    def last_script(self) -> str:
        return self.calls[-1][0]


@pytest.fixture(autouse=True)
def reset_metrics():
    """每个测试前后清空全局指标"""
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def project() -> Project:
    """两行（2 列 + 3 列）的示例项目"""
    workspace = Workspace(
        id="w1",
        name="dev",
        layout=GridLayout(rows=2, columns=[2, 3]),
        panes=[
            PaneConfig(position=(0, 0), directory="backend", command="npm run dev"),
            PaneConfig(position=(1, 2), directory="./docs"),
        ],
    )
    return Project(id="p1", name="demo", path="/home/u/proj", workspaces=[workspace])
