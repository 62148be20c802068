"""Error taxonomy.

All errors propagate to the immediate caller; nothing here is retried.
"""


class TermDeckError(Exception):
    """Base class for every error surfaced by termdeck."""

    kind = "error"


class InvalidLayout(TermDeckError):
    """Grid dimensions are inconsistent."""

    kind = "invalid_layout"


class NotFound(TermDeckError):
    """A referenced project or workspace id is absent."""

    kind = "not_found"

    def __init__(self, what: str, item_id: str):
        self.what = what
        self.item_id = item_id
        super().__init__(f"{what} not found: {item_id}")


class PlatformUnsupported(TermDeckError):
    """The chosen backend has no implementation on this platform."""

    kind = "platform_unsupported"

    def __init__(self, backend: str, platform: str, detail: str = ""):
        self.backend = backend
        self.platform = platform
        message = f"Terminal backend '{backend}' is not supported on {platform}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AutomationError(TermDeckError):
    """The external automation interpreter failed."""

    kind = "automation_error"


class LaunchFailed(AutomationError):
    """The interpreter could not be started at all."""

    kind = "launch_failed"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to start automation interpreter: {reason}")


class ScriptFailed(AutomationError):
    """The interpreter ran and exited non-zero."""

    kind = "script_failed"

    def __init__(self, stderr: str, returncode: int | None = None):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"Automation script error: {stderr}")


class AutomationTimeout(AutomationError):
    """The interpreter did not finish in time and was terminated."""

    kind = "timeout"

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Automation script timed out after {timeout:g}s")
