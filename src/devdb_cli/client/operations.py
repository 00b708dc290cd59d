"""Declarative table of the remote operations the client performs.

Each entry fixes the HTTP method, path template, declared success status and
request body fields of one API operation. ``DevDBClient`` looks its
operations up here, and the contract tests compare this table against the
backend's OpenAPI document.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from urllib.parse import quote


def _segment(value: str) -> str:
    encoded = quote(str(value), safe="")
    # "." and ".." would be collapsed by URL normalization
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded


@dataclass(frozen=True)
class Operation:
    name: str
    method: str
    path: str
    success: int
    action: str
    body_fields: tuple[str, ...] = ()
    query_params: tuple[str, ...] = ()

    @property
    def path_params(self) -> tuple[str, ...]:
        return tuple(
            field for _, field, _, _ in string.Formatter().parse(self.path) if field
        )

    def expand(self, **params: str) -> str:
        """Fill the path template, percent-encoding each parameter as one segment."""
        missing = set(self.path_params) - set(params)
        if missing:
            raise KeyError(f"{self.name}: missing path parameter(s) {sorted(missing)}")
        return self.path.format(**{key: _segment(value) for key, value in params.items()})


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation(
            "create_project", "POST", "/projects", 201, "creating project",
            body_fields=("owner", "name", "dbType", "dbVersion"),
        ),
        Operation(
            "list_projects", "GET", "/projects", 200, "listing projects",
            query_params=("owner",),
        ),
        Operation("show_project", "GET", "/projects/{id}", 200, "getting project"),
        Operation("delete_project", "DELETE", "/projects/{id}", 200, "deleting project"),
        Operation(
            "create_database", "POST", "/projects/{projectId}/databases", 201,
            "creating database",
            body_fields=("name",),
        ),
        Operation(
            "list_databases", "GET", "/projects/{projectId}/databases", 200,
            "listing databases",
        ),
        Operation(
            "show_database", "GET", "/projects/{projectId}/databases/{name}", 200,
            "getting database",
        ),
        Operation(
            "delete_database", "DELETE", "/projects/{projectId}/databases/{name}", 200,
            "deleting database",
        ),
    )
}
