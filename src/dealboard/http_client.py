"""Shared httpx client settings."""

from contextlib import contextmanager
from typing import Iterator, Optional

import httpx

DEFAULT_TIMEOUT = 30.0


def new_client() -> httpx.Client:
    return httpx.Client(timeout=DEFAULT_TIMEOUT, follow_redirects=True)


@contextmanager
def client_scope(client: Optional[httpx.Client] = None) -> Iterator[httpx.Client]:
    """
    Yield ``client`` untouched when the caller owns one; otherwise open a
    fresh client for the duration of the block and close it on exit.
    """
    if client is not None:
        yield client
        return
    with new_client() as fresh:
        yield fresh
