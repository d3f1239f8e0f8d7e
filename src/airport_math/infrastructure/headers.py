from __future__ import annotations

USER_AGENT = "Airport-Math-App/1.0"


def make_headers(accept: str = "application/json") -> dict[str, str]:
    """Return request headers for the public routing and dataset services.

    Both services ask clients to identify themselves with a stable User-Agent.
    """
    return {
        "Accept": accept,
        "User-Agent": USER_AGENT,
    }
