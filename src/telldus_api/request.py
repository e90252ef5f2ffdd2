"""Request descriptors and URL formatting shared by both transports."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import urlencode


@dataclass(frozen=True)
class Request:
    """One API call before transport-specific auth is applied."""

    path: str
    method: str = "GET"
    query: Optional[Mapping[str, Any]] = None


def _query_value(value: Any) -> Any:
    # Lowercase booleans, None as an empty value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def format_url(url: str, query: Optional[Mapping[str, Any]] = None) -> str:
    """
    Append a query string to a URL.

    Args:
        url: Base URL including the request path
        query: Query parameters; omitted entirely when empty or None

    Returns:
        The final URL
    """
    if not query:
        return url
    encoded = urlencode({key: _query_value(value) for key, value in query.items()})
    return f"{url}?{encoded}"
