"""Telemetry - 统一日志和指标入口

提供统一的日志工厂和指标 facade，便于观测性追踪。

日志格式: 由 setup_logging 在入口处一次性配置
指标示例: automation.ok, automation.failed, dispatch.launch_workspace
"""

import logging

from . import config

_configured = False


def get_logger(name: str) -> logging.Logger:
    """获取带模块前缀的 logger

    Args:
        name: 模块名（通常使用 __name__）

    Returns:
        Logger 实例
    """
    return logging.getLogger(name)


def setup_logging(level: str | None = None) -> None:
    """配置进程级日志（只在入口调用一次）

    重复调用只会调整日志级别，不会重复添加 handler。

    Args:
        level: 日志级别名称，默认使用 config.LOG_LEVEL
    """
    global _configured

    root = logging.getLogger("termdeck")
    root.setLevel((level or config.LOG_LEVEL).upper())
    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def redact_command(command: str) -> str:
    """截断过长的命令，用于日志输出"""
    max_len = config.LOG_MAX_CMD_LEN
    if len(command) <= max_len:
        return command
    return command[:max_len] + "..."


class Metrics:
    """指标收集 facade

    提供简单的计数器和 gauge 接口，当前实现为内存存储。
    """

    def __init__(self):
        self._counters: dict[str, int] = {}
        self._gauges: dict[str, float] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """递增计数器

        Args:
            name: 指标名（如 "automation.failed"）
            labels: 可选标签（如 {"backend": "iterm2"}）
            value: 递增值，默认 1
        """
        if not config.METRICS_ENABLED:
            return
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def gauge(self, name: str, value: float, labels: dict[str, str] | None = None) -> None:
        """设置 gauge 值"""
        if not config.METRICS_ENABLED:
            return
        key = self._make_key(name, labels)
        self._gauges[key] = value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """获取计数器值（用于测试）"""
        return self._counters.get(self._make_key(name, labels), 0)

    def get_gauge(self, name: str, labels: dict[str, str] | None = None) -> float:
        """获取 gauge 值（用于测试）"""
        return self._gauges.get(self._make_key(name, labels), 0.0)

    def reset(self) -> None:
        """重置所有指标（用于测试）"""
        self._counters.clear()
        self._gauges.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"


# 全局指标实例
metrics = Metrics()
