"""
Polars - Logging Module
Timestamped diagnostics from the store and its front ends, mirrored to stderr
and appended to ``polars.log``.
"""
import sys
from datetime import datetime

from polar_utils.conf import LOG_FILE

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG = True  # Set to False to disable logging
LOG_TO_STDERR = True  # Use stderr so logs don't pollute CLI / MCP stdout

# =============================================================================
# LOGGING
# =============================================================================

def polar_log(message: str) -> None:
    """Append log message to polars.log if LOG is enabled."""
    if not LOG:
        return
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_line = f"[{timestamp}] {message}\n"
    if LOG_TO_STDERR:
        sys.stderr.write(log_line)
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(log_line)


def read_log(tail: int = 0) -> str:
    """Return the log contents, only the last *tail* lines when tail > 0.

    Empty string when no log has been written yet.
    """
    if not LOG_FILE.exists():
        return ""
    lines = LOG_FILE.read_text(encoding="utf-8").splitlines(keepends=True)
    if tail > 0:
        lines = lines[-tail:]
    return "".join(lines)


def clear_log() -> bool:
    """Delete the log file. Returns True if there was one."""
    if not LOG_FILE.exists():
        return False
    LOG_FILE.unlink()
    return True
