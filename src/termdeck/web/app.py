"""FastAPI 应用初始化"""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from termdeck import config
from termdeck.dispatcher import CommandDispatcher
from termdeck.errors import (
    AutomationError,
    InvalidLayout,
    NotFound,
    PlatformUnsupported,
    TermDeckError,
)
from termdeck.store import TomlStore
from termdeck.telemetry import get_logger, setup_logging

logger = get_logger(__name__)

_STATUS_CODES: list[tuple[type[TermDeckError], int]] = [
    (InvalidLayout, 422),
    (NotFound, 404),
    (PlatformUnsupported, 501),
    (AutomationError, 502),
]


class RunCommandRequest(BaseModel):
    command: str


def _status_for(error: TermDeckError) -> int:
    for error_type, status in _STATUS_CODES:
        if isinstance(error, error_type):
            return status
    return 500


def create_app(dispatcher: CommandDispatcher) -> FastAPI:
    """创建 Web 应用

    路由对应 dispatcher 的三个入口，同步执行（FastAPI 在线程池中运行）。
    """
    app = FastAPI(title="termdeck")

    @app.exception_handler(TermDeckError)
    async def handle_termdeck_error(request: Request, exc: TermDeckError):
        logger.warning(f"{request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=_status_for(exc),
            content={"ok": False, "error": exc.kind, "message": str(exc)},
        )

    @app.post("/api/projects/{project_id}/workspaces/{workspace_id}/launch")
    def launch_workspace(project_id: str, workspace_id: str):
        dispatcher.launch_workspace(project_id, workspace_id)
        return {"ok": True}

    @app.post("/api/terminal/open")
    def open_terminal():
        dispatcher.open_terminal()
        return {"ok": True}

    @app.post("/api/projects/{project_id}/commands")
    def run_command(project_id: str, body: RunCommandRequest):
        dispatcher.run_command(project_id, body.command)
        return {"ok": True}

    return app


def main():
    """入口函数"""
    setup_logging()
    store = TomlStore()
    app = create_app(CommandDispatcher(projects=store, settings=store))

    logger.info(f"termdeck starting at http://{config.WEB_HOST}:{config.WEB_PORT}")
    try:
        uvicorn.run(app, host=config.WEB_HOST, port=config.WEB_PORT, log_level="info")
    except KeyboardInterrupt:
        print("\nServer stopped")
