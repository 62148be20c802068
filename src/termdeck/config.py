"""termdeck 配置

配置分为以下几类：
- 路径配置：项目与设置文件所在目录
- 终端配置：默认终端后端与窗口行为
- 自动化配置：分屏等待、解释器超时
- 日志/指标配置
- Web 配置
"""

import os
from pathlib import Path


def _env_float(name: str) -> float | None:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    return float(value)


# === 路径配置 ===
CONFIG_DIR = Path(os.environ.get("TERMDECK_CONFIG_DIR", "~/.config/cmdr")).expanduser()
SETTINGS_FILE_NAME = "config.toml"  # 设置文件名
PROJECTS_DIR_NAME = "projects"  # 项目文件目录（每个项目一个 .toml）

# === 终端配置 ===
DEFAULT_TERMINAL = "iterm2"  # iterm2 | terminal | tmux
DEFAULT_TERMINAL_BEHAVIOR = "new_window"  # new_window | use_existing
REUSE_BEHAVIOR = "use_existing"
TMUX_SOCKET_PATH = os.environ.get("TERMDECK_TMUX_SOCKET") or None  # None 使用默认 socket

# === 自动化配置 ===
SPLIT_SETTLE_SECONDS = 0.3  # 最后一次分屏后、写入命令前的等待（秒）
AUTOMATION_TIMEOUT_SECONDS = _env_float("TERMDECK_AUTOMATION_TIMEOUT")  # None => 不超时
OSASCRIPT_BINARY = "osascript"
SHELL_BINARY = "sh"

# === 日志配置 ===
LOG_LEVEL = os.environ.get("TERMDECK_LOG_LEVEL", "INFO")  # 日志级别
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_MAX_CMD_LEN = 120  # 命令日志截断长度

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集

# === Web 配置 ===
WEB_HOST = os.environ.get("TERMDECK_HOST", "127.0.0.1")
WEB_PORT = int(os.environ.get("TERMDECK_PORT", "8766"))
