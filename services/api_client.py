# taskboard/services/api_client.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from core.settings import API
from models.schemas import TaskRead

logger = logging.getLogger("taskboard.client")


class TaskApiClient:
    """Thin async wrapper over the ``/api/tasks`` endpoints.

    Every non-2xx response raises :class:`httpx.HTTPStatusError`; transport
    failures surface as :class:`httpx.TransportError`. Nothing is retried.
    """

    def __init__(self, http: Optional[httpx.AsyncClient] = None, *, base_url: Optional[str] = None):
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=base_url or API.base_url,
            timeout=API.request_timeout_sec,
        )

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def _send(self, method: str, url: str, *, json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        try:
            resp = await self.http.request(method, url, json=json)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    async def list_tasks(self) -> List[TaskRead]:
        resp = await self._send("GET", "/tasks")
        return [TaskRead.model_validate(item) for item in resp.json()]

    async def create_task(self, payload: Dict[str, Any]) -> TaskRead:
        resp = await self._send("POST", "/tasks", json=payload)
        return TaskRead.model_validate(resp.json())

    async def update_task(self, task_id: str, payload: Dict[str, Any]) -> TaskRead:
        resp = await self._send("PUT", f"/tasks/{task_id}", json=payload)
        return TaskRead.model_validate(resp.json())

    async def delete_task(self, task_id: str) -> None:
        await self._send("DELETE", f"/tasks/{task_id}")


__all__ = ["TaskApiClient"]
