"""Web 服务模块"""

from termdeck.web.app import create_app, main

__all__ = ["create_app", "main"]
