"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True, highlight=False)


class DevDBError(Exception):
    """Base exception for devdb-cli."""

    exit_code: int = 1


class UsageError(DevDBError):
    """Malformed or missing CLI input, detected before any request is sent."""

    exit_code = 2


class TransportError(DevDBError):
    """The request never produced a usable response.

    Covers connection, DNS, timeout and protocol failures as well as response
    bodies that cannot be decoded into the expected resource.
    """

    exit_code = 3

    def __init__(self, action: str, cause: object) -> None:
        self.action = action
        self.cause = cause
        super().__init__(f"error {action}: {cause}")


class RemoteError(DevDBError):
    """The API answered with a status other than the operation's success code."""

    exit_code = 4

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API returned status code {status_code}")


def error_handler(func: F) -> F:
    """Decorator that catches DevDBError and prints a one-line message."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DevDBError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
            raise SystemExit(exc.exit_code)

    return wrapper  # type: ignore[return-value]
