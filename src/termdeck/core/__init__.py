"""Core module - backend-agnostic string utilities"""

from .sanitize import escape_for_script, quote_shell_single, resolve_directory, unescape_script_literal

__all__ = [
    "resolve_directory",
    "escape_for_script",
    "unescape_script_literal",
    "quote_shell_single",
]
