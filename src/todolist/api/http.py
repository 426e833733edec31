"""REST adapter for the remote task service."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import httpx

from ..state.tasks import Task
from .base import NetworkError, NotFoundError, TaskAPI, task_from_record, tasks_from_payload


class HttpTaskAPI(TaskAPI):
    """Adapter for the ``/api/tasks`` JSON endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:3500",
        timeout: float = 10.0,
        resource: str = "/api/tasks",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.resource = "/" + resource.strip("/")
        self.transport = transport

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}{self.resource}"

    def item_url(self, task_id: str) -> str:
        return f"{self.collection_url}/{task_id}"

    async def list(self) -> List[Task]:
        data = await self._request("GET", self.collection_url)
        return tasks_from_payload(data)

    async def create(self, text: str) -> Task:
        data = await self._request("POST", self.collection_url, json={"task": text})
        return task_from_record(data)

    async def update(self, task_id: str, fields: Mapping[str, Any]) -> Task:
        data = await self._request("PATCH", self.item_url(task_id), json=dict(fields), task_id=task_id)
        return task_from_record(data)

    async def delete(self, task_id: str) -> None:
        await self._request("DELETE", self.item_url(task_id), task_id=task_id, expect_body=False)

    async def _request(
        self,
        method: str,
        url: str,
        json: Any = None,
        task_id: Optional[str] = None,
        expect_body: bool = True,
    ) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                resp = await client.request(method, url, json=json)
            except httpx.HTTPError as exc:
                raise NetworkError(f"{method} {url} failed: {exc}") from exc

        if resp.status_code == 404 and task_id is not None:
            raise NotFoundError(task_id)
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NetworkError(f"{method} {url} returned {resp.status_code}") from exc

        if not expect_body:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {method} {url}: {exc}") from exc
