"""Configuration for the UniFi controller client."""

from __future__ import annotations

import dataclasses
import os

from unifi_reports.controller.errors import ControllerConfigError

# Default configuration values - single source of truth
_DEFAULT_TIMEOUT_S = 20.0
_DEFAULT_USER_AGENT = "unifi-reports/0.1"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclasses.dataclass(frozen=True, slots=True)
class ControllerConfig:
    """Connection settings for a UniFi Network controller.

    Attributes
    ----------
    url
        Base URL of the controller, for example ``https://unifi:8443``.
    username
        Local controller account name.
    password
        Password for ``username``.
    unifi_os
        True for UniFi OS consoles (UDM, UCG, Cloud Key Gen2+), which serve
        the Network API under ``/proxy/network`` and log in via
        ``/api/auth/login``.
    verify_ssl
        Whether TLS certificates are verified.
    timeout_s
        Request timeout in seconds.
    user_agent
        ``User-Agent`` header sent with every request.

    """

    url: str
    username: str
    password: str
    unifi_os: bool = False
    verify_ssl: bool = True
    timeout_s: float = _DEFAULT_TIMEOUT_S
    user_agent: str = _DEFAULT_USER_AGENT

    @staticmethod
    def _required(env_var: str) -> str:
        raw = os.environ.get(env_var)
        if raw is None:
            raise ControllerConfigError.missing(env_var)
        value = raw.strip()
        if not value:
            raise ControllerConfigError.empty(env_var)
        return value

    @staticmethod
    def _parse_bool(env_var: str, *, default: bool) -> bool:
        raw = os.environ.get(env_var, "").strip().lower()
        if not raw:
            return default
        if raw in _TRUE_VALUES:
            return True
        if raw in _FALSE_VALUES:
            return False
        raise ControllerConfigError.invalid_parameter(
            env_var, raw, "Must be one of true/false, yes/no, on/off or 1/0"
        )

    @staticmethod
    def _parse_timeout() -> float:
        raw = os.environ.get("UNIFI_TIMEOUT_S", "").strip()
        if not raw:
            return _DEFAULT_TIMEOUT_S
        try:
            timeout_s = float(raw)
        except ValueError as exc:
            raise ControllerConfigError.invalid_parameter(
                "UNIFI_TIMEOUT_S", raw, "Must be a positive number of seconds"
            ) from exc
        if timeout_s <= 0:
            raise ControllerConfigError.invalid_parameter(
                "UNIFI_TIMEOUT_S", raw, "Must be a positive number of seconds"
            )
        return timeout_s

    @classmethod
    def from_env(cls) -> ControllerConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``UNIFI_CONTROLLER_URL``: Required controller base URL
        - ``UNIFI_USERNAME``: Required account name
        - ``UNIFI_PASSWORD``: Required password
        - ``UNIFI_OS``: Optional UniFi OS flag (default false)
        - ``UNIFI_VERIFY_SSL``: Optional TLS verification flag (default true)
        - ``UNIFI_TIMEOUT_S``: Optional positive timeout in seconds

        Returns
        -------
        ControllerConfig
            Configuration instance with values from environment.

        Raises
        ------
        ControllerConfigError
            If a required variable is missing or blank, or an optional one
            cannot be parsed.

        """
        return cls(
            url=cls._required("UNIFI_CONTROLLER_URL").rstrip("/"),
            username=cls._required("UNIFI_USERNAME"),
            password=cls._required("UNIFI_PASSWORD"),
            unifi_os=cls._parse_bool("UNIFI_OS", default=False),
            verify_ssl=cls._parse_bool("UNIFI_VERIFY_SSL", default=True),
            timeout_s=cls._parse_timeout(),
        )
