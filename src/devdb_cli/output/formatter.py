"""Renders command results as text reports, JSON or YAML."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import Any

from rich.console import Console

from devdb_cli.client.errors import UsageError

FORMATS = ("text", "json", "yaml")

console = Console(highlight=False)


def to_plain(data: Any) -> Any:
    """Convert models (or lists of models) to JSON-ready data using API field names."""
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(data, (list, tuple)):
        return [to_plain(item) for item in data]
    return data


def check_format(fmt: str) -> str:
    if fmt not in FORMATS:
        raise UsageError(
            f"unknown output format '{fmt}' (choose from {', '.join(FORMATS)})"
        )
    return fmt


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    console.print_json(json.dumps(to_plain(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    """Print data as YAML."""
    import yaml

    console.print(
        yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False),
        end="",
        markup=False,
        soft_wrap=True,
    )


def output_text(lines: Sequence[str]) -> None:
    """Print a fixed-layout report, one entry per line, verbatim."""
    console.print("\n".join(lines), markup=False, emoji=False, soft_wrap=True)


def output(
    data: Any,
    fmt: str = "text",
    *,
    render: Callable[[Any], Sequence[str]],
) -> None:
    """Dispatch output to the appropriate formatter."""
    check_format(fmt)
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    else:
        output_text(render(data))
