import json
import logging
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Union
from urllib.parse import urljoin

import requests
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.vercel.com"

QueryValue = Union[str, int, float, bool]


class ConfigProvider(Protocol):
    """Read access to the current settings, queried on every request."""

    def get(self, key: str) -> Optional[str]: ...


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ErrorCause(str, Enum):
    HTTP = "http"
    NETWORK = "network"


class VercelApiError(Exception):
    """A failed API call: either an error status from the server or no response at all."""

    def __init__(
        self, message: str, cause: ErrorCause, status_code: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.status_code = status_code


class ApiRequest(BaseModel):
    """One API call: verb, pre-interpolated path, optional JSON body and query."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    body: Optional[Any] = None
    query: Dict[str, QueryValue] = Field(default_factory=dict)


class VercelRestClient:
    """
    Python client for the Vercel REST API.

    Holds no session: the token and base URL are read from the configuration
    provider on every call, so settings changes apply to the next request.
    """

    def __init__(self, config: ConfigProvider):
        """
        Initialize the Vercel REST client.

        Args:
            config: Provider of ``api_key`` and ``base_url`` settings
        """
        self.config = config

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

        # Without a token the server rejects the call with an HTTP error
        api_key = self.config.get("api_key")
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    def _url(self, path: str) -> str:
        base_url = self.config.get("base_url") or DEFAULT_BASE_URL
        return urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))

    def execute(self, request: ApiRequest) -> Any:
        """
        Send a single request to the Vercel API.

        Args:
            request: The request to send

        Returns:
            The decoded JSON response body

        Raises:
            VercelApiError: On an error status or when no response was received
        """
        url = self._url(request.path)
        params = dict(request.query)
        logger.debug("%s %s params=%s", request.method.value, url, params)

        try:
            response = requests.request(
                request.method.value,
                url,
                headers=self._headers(),
                params=params or None,
                json=request.body,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code
            logger.debug("%s %s -> %s", request.method.value, url, status)
            raise VercelApiError(
                f"API Error: {status} - {_serialize_body(e.response)}",
                ErrorCause.HTTP,
                status_code=status,
            ) from e
        except requests.exceptions.RequestException as e:
            raise VercelApiError(f"Request failed: {e}", ErrorCause.NETWORK) from e

        logger.debug("%s %s -> %s", request.method.value, url, response.status_code)
        return _decode_body(response)

    def request(
        self,
        method: Union[HttpMethod, str],
        path: str,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Build an :class:`ApiRequest` and execute it."""
        query = {k: v for k, v in (params or {}).items() if v is not None}
        return self.execute(
            ApiRequest(method=HttpMethod(method), path=path, body=body, query=query)
        )

    def list_deployments(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """List deployments."""
        return self.request(HttpMethod.GET, "/v6/deployments", params=params)

    def get_deployment(
        self, deployment_id: str, params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Get a single deployment by ID or URL."""
        return self.request(
            HttpMethod.GET, f"/v13/deployments/{deployment_id}", params=params
        )

    def list_projects(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """List projects."""
        return self.request(HttpMethod.GET, "/v9/projects", params=params)

    def get_project(
        self, project_id: str, params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Get a single project by ID or name."""
        return self.request(HttpMethod.GET, f"/v9/projects/{project_id}", params=params)

    def list_domains(self, params: Optional[Dict[str, Any]] = None) -> Any:
        """List domains."""
        return self.request(HttpMethod.GET, "/v5/domains", params=params)

    def get_deployment_events(
        self, deployment_id: str, params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Get build and runtime events for a deployment."""
        return self.request(
            HttpMethod.GET, f"/v2/deployments/{deployment_id}/events", params=params
        )


def _decode_body(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _serialize_body(response: requests.Response) -> str:
    return json.dumps(_decode_body(response), separators=(",", ":"), ensure_ascii=False)
