"""Log helper function for creating request LogEntry objects."""

from easyinv.core.models import LogEntry
from easyinv.core.records import utc_now_iso


def request_entry(
    method: str,
    path: str,
    ip: str | None = None,
    user_agent: str | None = None,
) -> LogEntry:
    """Create a request log entry with automatic timestamp.

    Args:
        method: HTTP method
        path: Request path without query string
        ip: Client address, if known
        user_agent: User-Agent header, if sent

    Returns:
        LogEntry with current timestamp
    """
    return LogEntry(
        timestamp=utc_now_iso(),
        method=method,
        path=path,
        ip=ip,
        user_agent=user_agent,
    )
