# clients/python/configurator_api_client.py
import requests
from typing import Dict, Any, Optional, List, Tuple

class ConfiguratorClient:
    """
    Client for the Container Configurator API.

    One method per endpoint. Failed requests raise requests.HTTPError; the
    response body carries the error ``code`` (e.g. ``no_face_selected``).

    Attributes:
        base_url: Base URL of the API
        api_key: API key for authentication
        headers: Headers to include in all requests
    """

    def __init__(self, base_url: str, api_key: str):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            api_key: API key for authentication
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.headers = {"X-API-Key": api_key}

    def check_connection(self) -> Tuple[bool, str]:
        """
        Check if the API is accessible.

        Returns:
            Tuple of (success, message)
        """
        try:
            response = requests.get(
                f"{self.base_url}/health",
                headers=self.headers
            )
            if response.status_code == 200:
                return True, "Connection successful"
            else:
                return False, f"API returned status code {response.status_code}"
        except requests.RequestException as e:
            return False, f"Connection error: {str(e)}"

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> requests.Response:
        response = requests.request(
            method,
            f"{self.base_url}{path}",
            json=json,
            headers=self.headers
        )
        response.raise_for_status()
        return response

    def get_catalog(self) -> Dict[str, Any]:
        """Static dimensions, faces and prices."""
        return self._request("GET", "/catalog").json()

    def create_session(self) -> Dict[str, Any]:
        """
        Start a new session.

        Returns:
            Session state including ``session_id``
        """
        return self._request("POST", "/sessions").json()

    def get_session(self, session_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/sessions/{session_id}").json()

    def delete_session(self, session_id: str) -> None:
        self._request("DELETE", f"/sessions/{session_id}")

    def pointer_hit(self, session_id: str, unit_id: int, face: Optional[str] = None) -> Dict[str, Any]:
        """
        Report a pointer hit on a unit (and optionally one of its faces).

        Args:
            session_id: Session to act on
            unit_id: Unit that was hit
            face: "front", "back", "left", "right", "roof" or None

        Returns:
            Session state after the hit
        """
        body = {"unit_id": unit_id}
        if face is not None:
            body["face"] = face
        return self._request("POST", f"/sessions/{session_id}/pointer", json=body).json()

    def background_click(self, session_id: str) -> Dict[str, Any]:
        return self._request("POST", f"/sessions/{session_id}/background-click").json()

    def select_unit(self, session_id: str, unit_id: int) -> Dict[str, Any]:
        return self._request("POST", f"/sessions/{session_id}/select-unit", json={"unit_id": unit_id}).json()

    def select_face(self, session_id: str, unit_id: int, face: str) -> Dict[str, Any]:
        return self._request(
            "POST", f"/sessions/{session_id}/select-face", json={"unit_id": unit_id, "face": face}
        ).json()

    def deselect_all(self, session_id: str) -> Dict[str, Any]:
        return self._request("POST", f"/sessions/{session_id}/deselect").json()

    def add_unit(self, session_id: str) -> Dict[str, Any]:
        """
        Attach a new unit to the selected face.

        Returns:
            Dictionary with the new ``unit`` and ``total_price``

        Raises:
            requests.HTTPError: 409 if no face is selected
        """
        return self._request("POST", f"/sessions/{session_id}/units").json()

    def remove_unit(self, session_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/sessions/{session_id}/units").json()

    def set_wall_variant(self, session_id: str, variant: str, face: Optional[str] = None) -> Dict[str, Any]:
        """
        Set Base/Window/Door on the selected wall.

        Raises:
            requests.HTTPError: 409 without a matching selection, 400 on the roof
        """
        body = {"variant": variant}
        if face is not None:
            body["face"] = face
        return self._request("PUT", f"/sessions/{session_id}/walls", json=body).json()

    def get_price(self, session_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/sessions/{session_id}/price").json()

    def get_render_state(self, session_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"/sessions/{session_id}/render").json()

    def get_report(self, session_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/sessions/{session_id}/report").json()

    def download_report(self, session_id: str) -> Tuple[str, str]:
        """
        Download the text assembly scheme.

        Returns:
            Tuple of (filename, content)
        """
        response = self._request("GET", f"/sessions/{session_id}/report.txt")
        disposition = response.headers.get("Content-Disposition", "")
        filename = disposition.split("filename=")[-1].strip('"') if "filename=" in disposition else "assembly-scheme.txt"
        return filename, response.text
