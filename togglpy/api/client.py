"""
TogglClient: A client for interacting with the Toggl Track API.
"""
import requests
from typing import Optional, Dict, Any, List, Tuple
from datetime import date

from ..errors import NetworkError, DecodeError
from ..reports.time_entry import TimeEntry, Project

DEFAULT_BASE_URL = "https://api.track.toggl.com/api/v9"

# Toggl expects the API token as the username and this literal as the password
API_TOKEN_PASSWORD = "api_token"

ProjectKey = Tuple[int, int]

class ProjectCache:
    """Projects resolved during one run, keyed by (workspace_id, project_id)."""

    def __init__(self):
        self._projects: Dict[ProjectKey, Project] = {}

    def get(self, key: ProjectKey) -> Optional[Project]:
        return self._projects.get(key)

    def insert(self, key: ProjectKey, project: Project) -> Project:
        """Store a project unless the key is already cached.

        Returns:
            The project stored under the key
        """
        return self._projects.setdefault(key, project)

    def __contains__(self, key) -> bool:
        return key in self._projects

    def __len__(self) -> int:
        return len(self._projects)

class TogglClient:
    """A client for interacting with the Toggl Track API."""

    def __init__(self, api_token: str, base_url: str = DEFAULT_BASE_URL, timeout: float = 30):
        """Initialize the TogglClient.

        Args:
            api_token: Toggl API token
            base_url: API root (optional)
            timeout: Per-request timeout in seconds (optional)
        """
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.projects = ProjectCache()

    def api_get(self, url: str, params: Optional[dict] = None) -> Any:
        """Make a GET request to the Toggl API.

        Args:
            url: API endpoint URL
            params: Query parameters (optional)

        Returns:
            API response as JSON

        Raises:
            NetworkError: If the API request fails
            DecodeError: If the response is not JSON
        """
        try:
            resp = requests.get(url, params=params, auth=(self.api_token, API_TOKEN_PASSWORD),
                                timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"API request failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON from {url}: {e}") from e

    def fetch_time_entries(self, start_date: date, end_date: date) -> List[TimeEntry]:
        """Get time entries starting in [start_date, end_date).

        Args:
            start_date: First day to include
            end_date: First day to exclude

        Returns:
            List of time entries
        """
        url = f"{self.base_url}/me/time_entries"
        params = {
            "start_date": start_date.strftime("%Y-%m-%d"),
            "end_date": end_date.strftime("%Y-%m-%d"),
        }
        data = self.api_get(url, params)
        if not isinstance(data, list):
            raise DecodeError(f"Expected a list of time entries, got {type(data).__name__}")
        return [TimeEntry(e) for e in data]

    def fetch_project(self, workspace_id: int, project_id: int) -> Project:
        """Get a project, asking the API only the first time it is seen.

        Args:
            workspace_id: Workspace ID
            project_id: Project ID

        Returns:
            Project
        """
        key = (workspace_id, project_id)
        project = self.projects.get(key)
        if project is not None:
            return project

        url = f"{self.base_url}/workspaces/{workspace_id}/projects/{project_id}"
        project = Project.from_api(self.api_get(url))
        return self.projects.insert(key, project)

    def fetch_me(self) -> Dict[str, Any]:
        """Get the authenticated user."""
        user = self.api_get(f"{self.base_url}/me")
        if not isinstance(user, dict):
            raise DecodeError(f"Expected user object, got {type(user).__name__}")
        return user

    def fetch_workspaces(self) -> List[Dict[str, Any]]:
        """Get the workspaces the user belongs to."""
        workspaces = self.api_get(f"{self.base_url}/me/workspaces")
        if not isinstance(workspaces, list):
            raise DecodeError(f"Expected a list of workspaces, got {type(workspaces).__name__}")
        return workspaces
