"""HTTP execution of resolved requests."""

from __future__ import annotations
from typing import Optional

import requests
from rich.console import Console
from rich.markup import escape

from ..config import constants
from ..domain.entities import RequestDescriptor

# Diagnostics go to stderr so stdout stays clean for response bodies
debug_console = Console(stderr=True, highlight=False)


def get_session() -> requests.Session:
    """New session; callers own its lifetime."""
    return requests.Session()


def print_request(request: RequestDescriptor, console: Console = debug_console) -> None:
    """Print method, url, headers and a body preview."""
    console.print(f"> {request.method} {escape(request.url or '')}", style="dim")
    console.print("> headers:", style="dim")
    for key, value in request.headers.items():
        console.print(escape(f"{key}: {value}"), style="dim")
    if request.body:
        preview = request.body[:constants.DEBUG_BODY_PREVIEW]
        if len(request.body) > constants.DEBUG_BODY_PREVIEW:
            preview += "..."
        console.print(escape(f"> body: {preview}"), style="dim")


def print_response(response: requests.Response, console: Console = debug_console) -> None:
    """Print status line and headers."""
    console.print()
    console.print(escape(f"< {response.status_code} {response.reason}"), style="dim")
    for key, value in response.headers.items():
        console.print(escape(f"< {key}: {value}"), style="dim")


def send(
    request: RequestDescriptor,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    debug: bool = False,
) -> requests.Response:
    """Execute ``request`` and return the response unchanged.

    HTTP error statuses are not raised; connection errors from ``requests``
    propagate to the caller.
    """
    if debug:
        print_request(request)

    own_session = session is None
    session = session or get_session()
    try:
        response = session.request(
            request.method or "GET",
            request.url,
            headers={key: str(value) for key, value in request.headers.items()},
            data=request.body.encode("utf-8") if request.body else None,
            timeout=timeout,
        )
    finally:
        if own_session:
            session.close()

    if debug:
        print_response(response)
    return response
