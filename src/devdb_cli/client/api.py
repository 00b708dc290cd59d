"""DevDB API HTTP client."""

from __future__ import annotations

import time
from typing import Any, Optional, TypeVar

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from devdb_cli import __version__
from devdb_cli.client.errors import RemoteError, TransportError, UsageError
from devdb_cli.client.operations import OPERATIONS, Operation
from devdb_cli.config.models import Settings
from devdb_cli.models import (
    Ack,
    CreateDatabaseRequest,
    CreateProjectRequest,
    Database,
    DbType,
    Project,
)

T = TypeVar("T")

logger = structlog.get_logger(__name__)

_PROJECT = TypeAdapter(Optional[Project])
_PROJECTS = TypeAdapter(Optional[list[Project]])
_DATABASE = TypeAdapter(Optional[Database])
_DATABASES = TypeAdapter(Optional[list[Database]])


def _describe(exc: ValidationError) -> str:
    error = exc.errors()[0]
    loc = ".".join(str(part) for part in error["loc"])
    return f"{loc}: {error['msg']}" if loc else error["msg"]


class DevDBClient:
    """Synchronous HTTP client for the DevDB REST API.

    Every public method performs exactly one request and returns a typed
    resource, or raises ``RemoteError`` for an unexpected status code and
    ``TransportError`` when no usable response was received.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.base_url = settings.api_url
        try:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Accept": "application/json",
                    "User-Agent": f"devdb-cli/{__version__}",
                },
            )
        except httpx.InvalidURL as exc:
            raise UsageError(f"invalid API URL '{self.base_url}': {exc}") from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> DevDBClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _send(
        self,
        op: Operation,
        path_params: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        path = op.expand(**(path_params or {}))
        log = logger.bind(operation=op.name, method=op.method, path=path)
        log.debug("api_request", base_url=self.base_url)
        started = time.monotonic()
        try:
            response = self._client.request(op.method, path, **kwargs)
        except httpx.ConnectError as exc:
            raise TransportError(
                op.action, f"cannot connect to {self.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise TransportError(
                op.action, f"request to {self.base_url} timed out: {exc}"
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise TransportError(op.action, exc) from exc
        log.debug(
            "api_response",
            status=response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        # Only the declared status counts as success; the body of anything
        # else is deliberately not parsed.
        if response.status_code != op.success:
            raise RemoteError(response.status_code)
        return response

    def _decode(self, op: Operation, response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        try:
            return adapter.validate_json(response.content)
        except ValidationError as exc:
            raise TransportError(
                op.action, f"malformed response body ({_describe(exc)})"
            ) from exc

    def _one(self, op: Operation, response: httpx.Response, adapter: TypeAdapter[Any]) -> Any:
        value = self._decode(op, response, adapter)
        if value is None:
            raise TransportError(op.action, "response body was empty")
        return value

    def _many(self, op: Operation, response: httpx.Response, adapter: TypeAdapter[Any]) -> list[Any]:
        return self._decode(op, response, adapter) or []

    @staticmethod
    def _ack(response: httpx.Response) -> Ack:
        if not response.content.strip():
            return Ack()
        try:
            data = response.json()
        except ValueError:
            return Ack(message=response.text.strip() or None)
        if isinstance(data, dict) and isinstance(data.get("message"), str):
            return Ack(message=data["message"])
        return Ack()

    # -- projects ----------------------------------------------------------

    def create_project(
        self, owner: str, name: str, db_type: DbType, db_version: str,
    ) -> Project:
        op = OPERATIONS["create_project"]
        body = CreateProjectRequest(
            owner=owner, name=name, db_type=db_type, db_version=db_version,
        )
        response = self._send(op, json=body.model_dump(mode="json", by_alias=True))
        return self._one(op, response, _PROJECT)

    def list_projects(self, owner: str | None = None) -> list[Project]:
        op = OPERATIONS["list_projects"]
        params = {"owner": owner} if owner else None
        response = self._send(op, params=params)
        return self._many(op, response, _PROJECTS)

    def show_project(self, project_id: str) -> Project:
        op = OPERATIONS["show_project"]
        response = self._send(op, {"id": project_id})
        return self._one(op, response, _PROJECT)

    def delete_project(self, project_id: str) -> Ack:
        response = self._send(OPERATIONS["delete_project"], {"id": project_id})
        return self._ack(response)

    # -- databases ---------------------------------------------------------

    def create_database(self, project_id: str, name: str) -> Database:
        op = OPERATIONS["create_database"]
        body = CreateDatabaseRequest(name=name)
        response = self._send(
            op, {"projectId": project_id}, json=body.model_dump(mode="json"),
        )
        return self._one(op, response, _DATABASE)

    def list_databases(self, project_id: str) -> list[Database]:
        op = OPERATIONS["list_databases"]
        response = self._send(op, {"projectId": project_id})
        return self._many(op, response, _DATABASES)

    def show_database(self, project_id: str, name: str) -> Database:
        op = OPERATIONS["show_database"]
        response = self._send(op, {"projectId": project_id, "name": name})
        return self._one(op, response, _DATABASE)

    def delete_database(self, project_id: str, name: str) -> Ack:
        response = self._send(
            OPERATIONS["delete_database"], {"projectId": project_id, "name": name},
        )
        return self._ack(response)
