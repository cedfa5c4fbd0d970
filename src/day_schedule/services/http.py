"""
Shared HTTP session for astronomy providers.

A provider answers with a small JSON record per day, so the session asks
for JSON, retries the transient failures (rate limit, gateway errors) with
exponential backoff, and applies a default timeout to every request.

Usage::

    from day_schedule.services.http import session

    resp = session.get(url, params={"date": "2024-06-21"})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from day_schedule import __version__

#: Backoff of 0s, 1s, 2s between attempts; a day's record is cheap to refetch.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # callers use resp.raise_for_status()
)

DEFAULT_TIMEOUT = 15  # seconds

USER_AGENT = f"day-schedule/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter and default timeout.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout used when a request does not pass its own.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})

    send = s.send

    def _send(prepared: requests.PreparedRequest, **kwargs: object) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send  # type: ignore[method-assign]
    return s


session: requests.Session = create_session()
