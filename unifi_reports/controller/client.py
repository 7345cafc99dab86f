"""httpx-backed UniFi controller client implementing the site transport."""

from __future__ import annotations

import typing as typ
import urllib.parse

import httpx
import msgspec

from unifi_reports.logging import get_logger, log_debug, log_info, log_warning

from .errors import (
    ControllerAPIError,
    ControllerConfigError,
    ControllerResponseShapeError,
)
from .models import ErrorBody, ResponseMeta

if typ.TYPE_CHECKING:
    import types

    from .config import ControllerConfig

T = typ.TypeVar("T")

logger = get_logger(__name__)

_HTTP_ERROR_STATUS_THRESHOLD = 400
_CSRF_HEADERS = ("X-Updated-CSRF-Token", "X-CSRF-Token")
_UNIFI_OS_PREFIX = "/proxy/network"


class ControllerClient:
    """Session-based client for the UniFi Network controller API.

    Implements :class:`~unifi_reports.reports.SiteRequestTransport`. The
    client logs in lazily on the first site request and keeps the session
    cookie (and, on UniFi OS, the CSRF token) for later requests.

    Parameters
    ----------
    config
        Controller connection settings.
    http_client
        Optional ``httpx.Client`` for testing. If not provided, the instance
        creates and owns its own client.

    Examples
    --------
    >>> from unifi_reports.controller import ControllerClient, ControllerConfig
    >>> with ControllerClient(ControllerConfig.from_env()) as client:
    ...     client.site_request("GET", "default", "stat/health", None, target=dict)

    """

    def __init__(
        self,
        config: ControllerConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client with the provided controller configuration."""
        if not config.username.strip():
            raise ControllerConfigError.empty("username")
        if not config.password:
            raise ControllerConfigError.empty("password")

        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=config.timeout_s,
            verify=config.verify_ssl,
            headers={
                "User-Agent": config.user_agent,
                "Accept": "application/json",
            },
        )
        self._csrf_token: str | None = None
        self._logged_in = False
        if not config.verify_ssl:
            log_warning(
                logger,
                "TLS certificate verification is disabled for %s",
                config.url,
            )

    @property
    def config(self) -> ControllerConfig:
        """Read-only access to the client configuration."""
        return self._config

    @property
    def logged_in(self) -> bool:
        """Return True once a login has succeeded."""
        return self._logged_in

    def __enter__(self) -> ControllerClient:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        """Close owned HTTP resources on leaving a ``with`` block."""
        self.close()

    def close(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            self._client.close()

    def login(self) -> None:
        """Authenticate and retain the session for subsequent requests.

        Raises
        ------
        ControllerAPIError
            If the controller rejects the credentials or cannot be reached.

        """
        path = "/api/auth/login" if self._config.unifi_os else "/api/login"
        response = self._send(
            "POST",
            f"{self._config.url}{path}",
            content=msgspec.json.encode(
                {
                    "username": self._config.username,
                    "password": self._config.password,
                }
            ),
        )
        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise ControllerAPIError.login_failed(
                response.status_code, _error_message(response)
            )
        self._logged_in = True
        log_info(
            logger,
            "Logged in to controller %s as %s",
            self._config.url,
            self._config.username,
        )

    def site_url(self, site: str, path: str) -> str:
        """Return the absolute URL of ``path`` under ``site``.

        The site name is percent-encoded as a single path segment.
        """
        prefix = _UNIFI_OS_PREFIX if self._config.unifi_os else ""
        segment = urllib.parse.quote(site, safe="")
        return f"{self._config.url}{prefix}/api/s/{segment}/{path.lstrip('/')}"

    def site_request(
        self,
        method: str,
        site: str,
        path: str,
        body: bytes | None,
        *,
        target: type[T],
    ) -> T:
        """Send a request scoped to ``site`` and decode the JSON response.

        Raises
        ------
        ControllerAPIError
            If the request fails, returns an error status, or the response
            metadata reports ``rc == "error"``.
        ControllerResponseShapeError
            If the response body cannot be decoded into ``target``.

        """
        if not self._logged_in:
            self.login()

        url = self.site_url(site, path)
        log_debug(logger, "Sending %s %s", method, url)
        response = self._send(method, url, content=body)
        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise ControllerAPIError.http_error(
                response.status_code, path, _error_message(response)
            )

        try:
            decoded = msgspec.json.decode(response.content, type=target)
        except msgspec.DecodeError as exc:
            raise ControllerResponseShapeError.invalid_json(
                response.content, str(exc)
            ) from exc

        meta = getattr(decoded, "meta", None)
        if isinstance(meta, ResponseMeta) and meta.is_error:
            raise ControllerAPIError.api_error(meta.msg, path)
        return decoded

    def _send(
        self, method: str, url: str, *, content: bytes | None
    ) -> httpx.Response:
        """Perform an HTTP request, mapping transport failures to API errors."""
        headers: dict[str, str] = {}
        if content is not None:
            headers["Content-Type"] = "application/json"
        if self._csrf_token is not None:
            headers["X-CSRF-Token"] = self._csrf_token

        try:
            response = self._client.request(
                method, url, content=content, headers=headers
            )
        except httpx.TimeoutException as exc:
            raise ControllerAPIError.timeout() from exc
        except httpx.RequestError as exc:
            raise ControllerAPIError.network_error(str(exc)) from exc

        self._remember_csrf_token(response)
        return response

    def _remember_csrf_token(self, response: httpx.Response) -> None:
        for header in _CSRF_HEADERS:
            token = response.headers.get(header)
            if token:
                self._csrf_token = token
                return


def _error_message(response: httpx.Response) -> str | None:
    """Return ``meta.msg`` from an error body, if it carries one."""
    try:
        body = msgspec.json.decode(response.content, type=ErrorBody)
    except msgspec.DecodeError:
        return None
    return body.meta.msg
