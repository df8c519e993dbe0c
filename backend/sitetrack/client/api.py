"""HTTP access layer used by the UI: one call per store operation.

Every method returns the decoded JSON payload. Errors are not classified or
retried here, ``httpx`` exceptions reach the caller unchanged.
"""
from typing import Any

import httpx

from sitetrack.core.config import settings

Project = dict[str, Any]
WorkItem = dict[str, Any]


class ProjectService:
    def __init__(self, client: httpx.Client, prefix: str | None = None):
        self.client = client
        self.prefix = settings.API_PREFIX if prefix is None else prefix

    @classmethod
    def from_url(cls, base_url: str | None = None, timeout: float | None = None) -> "ProjectService":
        client = httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.CLIENT_TIMEOUT,
            headers={"Content-Type": "application/json"},
        )
        return cls(client)

    def close(self) -> None:
        self.client.close()

    def _url(self, path: str) -> str:
        return f"{self.prefix}{path}"

    def _json(self, response: httpx.Response):
        response.raise_for_status()
        return response.json()

    def get_all(self) -> list[Project]:
        return self._json(self.client.get(self._url("/projects")))

    def get_by_id(self, project_id: str) -> Project:
        return self._json(self.client.get(self._url(f"/projects/{project_id}")))

    def create(self, project: Project) -> Project:
        return self._json(self.client.post(self._url("/projects"), json=project))

    def update(self, project_id: str, project: Project) -> Project:
        return self._json(self.client.put(self._url(f"/projects/{project_id}"), json=project))

    def delete(self, project_id: str) -> None:
        self.client.delete(self._url(f"/projects/{project_id}")).raise_for_status()

    def get_work_items(self, project_id: str) -> list[WorkItem]:
        return self._json(self.client.get(self._url(f"/projects/{project_id}/work-items")))

    def create_work_item(self, project_id: str, work_item: WorkItem) -> WorkItem:
        return self._json(self.client.post(self._url(f"/projects/{project_id}/work-items"), json=work_item))
