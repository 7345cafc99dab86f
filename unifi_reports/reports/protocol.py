"""Transport capability consumed by the report service."""

from __future__ import annotations

import typing as typ

T = typ.TypeVar("T")


@typ.runtime_checkable
class SiteRequestTransport(typ.Protocol):
    """Protocol for performing a site-scoped controller request.

    Implementations send ``body`` to ``path`` under the given site and decode
    the JSON response into ``target``. Network failures, error statuses and
    malformed bodies are raised by the implementation; the report service
    propagates them unchanged.

    """

    def site_request(
        self,
        method: str,
        site: str,
        path: str,
        body: bytes | None,
        *,
        target: type[T],
    ) -> T:
        """Send a request scoped to ``site`` and decode the response.

        Parameters
        ----------
        method
            HTTP method, for example ``"GET"``.
        site
            Controller site name.
        path
            Site-relative resource path such as ``stat/report/hourly.site``.
        body
            Serialized JSON request body, or ``None`` for no body.
        target
            Type the JSON response is decoded into.

        Returns
        -------
        T
            The decoded response.

        """
        ...
