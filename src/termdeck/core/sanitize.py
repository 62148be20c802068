"""Path and text sanitizing for generated automation scripts.

Everything here is a pure string function: no filesystem access, no errors.
"""


def resolve_directory(project_root: str, pane_directory: str) -> str:
    """Resolve a pane's working directory against the project root.

    Args:
        project_root: Project root path
        pane_directory: Directory from the pane config ("" / "." / "./x" / "x" / "/abs")

    Returns:
        Absolute directory string. The join is purely textual.
    """
    if not pane_directory or pane_directory == ".":
        return project_root
    if pane_directory.startswith("/"):
        return pane_directory
    if pane_directory.startswith("./"):
        return f"{project_root}/{pane_directory[2:]}"
    return f"{project_root}/{pane_directory}"


def escape_for_script(text: str) -> str:
    """Escape text for a double-quoted AppleScript string literal.

    Backslash must be escaped before the double quote, otherwise the
    backslash added for each quote would be doubled again.
    """
    return text.replace("\\", "\\\\").replace('"', '\\"')


def unescape_script_literal(text: str) -> str:
    """Inverse of escape_for_script."""
    result = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            result.append(next(chars, "\\"))
        else:
            result.append(ch)
    return "".join(result)


def quote_shell_single(text: str) -> str:
    """Make text safe inside a single-quoted shell word ('...')."""
    return text.replace("'", "'\\''")
