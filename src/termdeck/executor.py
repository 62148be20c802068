"""Automation executor - runs rendered scripts through an external interpreter."""

import subprocess
from collections.abc import Sequence

from . import config
from .errors import AutomationTimeout, LaunchFailed, ScriptFailed
from .telemetry import get_logger, metrics

logger = get_logger(__name__)


class AutomationExecutor:
    """Spawns one interpreter process per script and waits for it.

    No retries: failures are raised to the caller immediately. When a
    timeout is set, the child is killed on expiry.
    """

    def __init__(self, timeout: float | None = config.AUTOMATION_TIMEOUT_SECONDS):
        """Initialize AutomationExecutor.

        Args:
            timeout: Seconds to wait for the interpreter. None waits forever.
        """
        self._timeout = timeout

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def execute(self, script: str, interpreter: Sequence[str]) -> None:
        """Run a script.

        Args:
            script: Script text, passed as the last argument
            interpreter: Interpreter argv prefix (e.g. ["osascript", "-e"])

        Raises:
            LaunchFailed: The interpreter could not be started
            ScriptFailed: The interpreter exited non-zero
            AutomationTimeout: The interpreter exceeded the timeout
        """
        cmd = [*interpreter, script]
        program = cmd[0]
        logger.debug(f"Executing {program} script ({len(script)} chars)")

        try:
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"{program} timed out after {self._timeout}s")
            metrics.inc("automation.failed", {"reason": "timeout"})
            raise AutomationTimeout(self._timeout) from e
        except OSError as e:
            logger.error(f"Failed to start {program}: {e}")
            metrics.inc("automation.failed", {"reason": "launch"})
            raise LaunchFailed(str(e)) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.error(f"{program} exited with {result.returncode}: {stderr}")
            metrics.inc("automation.failed", {"reason": "script"})
            raise ScriptFailed(stderr, returncode=result.returncode)

        metrics.inc("automation.ok")
