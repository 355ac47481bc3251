import base64
import json
import logging
from http import HTTPStatus
from types import TracebackType
from typing import Any

import requests

from .errors import UnexpectedStatusError

logger = logging.getLogger(__name__)


def encode_api_key(api_key: str) -> str:
    """Turn an API key into a Basic auth token: base64 of ``"<key>:"``."""
    return base64.b64encode(f"{api_key}:".encode()).decode("ascii")


class AsanaClient:
    """Thin wrapper over the Asana REST API.

    Every operation is a single request/response round trip. Read operations
    expect ``200 OK`` and the project creation expects ``201 Created``; any
    other status raises :class:`UnexpectedStatusError`. Transport errors from
    ``requests`` and JSON decoding errors propagate unchanged.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self._api_url = api_url
        self._base64_key = encode_api_key(api_key)
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def base64_key(self) -> str:
        return self._base64_key

    def close(self) -> None:
        """Release the connection pool if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "AsanaClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Basic {self._base64_key}"}

    def _check_status(
        self, method: str, url: str, response: requests.Response, expected: HTTPStatus
    ) -> str:
        logger.debug(f"Response status: {response.status_code}")
        if response.status_code != expected:
            raise UnexpectedStatusError(method, url, response.status_code, int(expected))
        return response.text

    def _get_from_api(self, url: str) -> str:
        logger.debug(f"GET {url}")
        response = self.session.get(url, headers=self._auth_headers(), timeout=self.timeout)
        return self._check_status("GET", url, response, HTTPStatus.OK)

    def _post_to_api(self, url: str, fields: list[tuple[str, str]]) -> str:
        logger.debug(f"POST {url} fields={[key for key, _ in fields]}")
        response = self.session.post(
            url, data=fields, headers=self._auth_headers(), timeout=self.timeout
        )
        return self._check_status("POST", url, response, HTTPStatus.CREATED)

    def get_workspaces(self) -> Any:
        return json.loads(self._get_from_api(f"{self._api_url}/workspaces"))

    def get_workspace_projects(self, workspace_id: int) -> Any:
        return json.loads(self._get_from_api(f"{self._api_url}/workspaces/{workspace_id}/projects"))

    def get_project_tasks(self, project_id: int) -> Any:
        return json.loads(self._get_from_api(f"{self._api_url}/projects/{project_id}/tasks"))

    def get_teams(self, organization_id: int) -> Any:
        """List the teams of an organization (a workspace with teams enabled)."""
        return json.loads(
            self._get_from_api(f"{self._api_url}/organizations/{organization_id}/teams")
        )

    def create_project(self, name: str, workspace_id: int, team_id: int) -> Any:
        """Create a project in a workspace, owned by the given team.

        Args:
            name: Name of the new project
            workspace_id: ID of the workspace the project belongs to
            team_id: ID of the team that owns the project

        Returns:
            The created project as returned by the API
        """
        fields = [
            ("name", name),
            ("workspace", str(workspace_id)),
            ("team", str(team_id)),
        ]
        return json.loads(self._post_to_api(f"{self._api_url}/projects", fields))
