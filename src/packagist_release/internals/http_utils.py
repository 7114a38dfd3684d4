"""HTTP utilities with a shared, pooled session."""

import threading

import requests
from requests.adapters import HTTPAdapter

from packagist_release import __version__

USER_AGENT = f"packagist-release/{__version__}"


def create_session(
    pool_connections: int = 10,
    pool_maxsize: int = 10,
) -> requests.Session:
    """
    Create a requests Session talking to Packagist.

    Failed requests are not retried: a missing package stays missing and
    transport failures are reported to the caller right away.
    """
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})

    adapter = HTTPAdapter(
        pool_connections=pool_connections,
        pool_maxsize=pool_maxsize,
        max_retries=0,
    )

    session.mount("http://", adapter)
    session.mount("https://", adapter)

    return session


_global_session: requests.Session | None = None
_global_session_lock = threading.Lock()


def get_global_session() -> requests.Session:
    """
    Get or create the session shared by the whole process.

    Thread-safe: uses double-checked locking for initialization.
    """
    global _global_session
    if _global_session is None:
        with _global_session_lock:
            if _global_session is None:
                _global_session = create_session()
    return _global_session


def close_global_session() -> None:
    """Close and reset the global session. Mostly useful in tests."""
    global _global_session
    with _global_session_lock:
        if _global_session is not None:
            _global_session.close()
            _global_session = None
