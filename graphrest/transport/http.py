"""HTTP transport for the legacy REST dialect."""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger

from graphrest.config.schema import Settings
from graphrest.errors import GraphRestError
from graphrest.transport.protocol import RemoteReply


class TransportError(GraphRestError):
    def __init__(
        self,
        message: str,
        *,
        code: str = "TRANSPORT_ERROR",
        status_code: int | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message, code=code, details={"status_code": status_code, "retryable": retryable})
        self.status_code = status_code
        self.retryable = retryable


class HttpTransport:
    """Sends invocations over HTTP with httpx and parses JSON replies."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def server(self, transport_options: dict[str, Any], http_verb: str = "GET") -> str:
        """Pick the host for a call from its routing directives."""
        # The read replica only serves GETs.
        if transport_options.get("read_only") and str(http_verb).upper() == "GET":
            host = self.settings.read_only_rest_server
        else:
            host = self.settings.rest_server
        if transport_options.get("beta"):
            # api.facebook.com -> api.beta.facebook.com
            label, _, rest = host.partition(".")
            host = f"{label}.{self.settings.beta_marker}.{rest}" if rest else f"{label}.{self.settings.beta_marker}"
        return host

    def build_url(
        self,
        path: str,
        transport_options: dict[str, Any],
        params: dict[str, Any] | None = None,
        http_verb: str = "GET",
    ) -> str:
        # Tokens never travel over plain http.
        secure = self.settings.use_ssl or bool(self.settings.access_token) or "access_token" in (params or {})
        scheme = "https" if secure else "http"
        return f"{scheme}://{self.server(transport_options, http_verb)}/{path.lstrip('/')}"

    def encode_params(self, parameters: dict[str, Any]) -> dict[str, str]:
        """Stringify parameters; non-string values are sent as JSON."""
        encoded: dict[str, str] = {}
        for key, value in parameters.items():
            if value is None:
                continue
            encoded[str(key)] = value if isinstance(value, str) else json.dumps(value)
        if self.settings.access_token and "access_token" not in encoded:
            encoded["access_token"] = self.settings.access_token
        return encoded

    def perform(
        self,
        path: str,
        parameters: dict[str, Any],
        http_verb: str,
        transport_options: dict[str, Any],
    ) -> RemoteReply:
        verb = str(http_verb or "GET").upper()
        params = self.encode_params(parameters)
        if verb not in {"GET", "POST"}:
            # Only GET and POST are accepted; other verbs ride on POST.
            params["method"] = verb.lower()
            verb = "POST"
        url = self.build_url(path, transport_options, params, verb)
        logger.debug(f"REST {verb} {url}")
        try:
            with httpx.Client(timeout=self.settings.timeout_seconds) as client:
                if verb == "GET":
                    resp = client.request(verb, url, params=params, headers=self._headers())
                else:
                    resp = client.request(verb, url, data=params, headers=self._headers())
        except httpx.TimeoutException as exc:
            logger.warning(f"REST call timed out: {verb} {path}")
            raise TransportError(
                f"timeout: {verb} {path}",
                code="TRANSPORT_TIMEOUT",
                retryable=True,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning(f"REST call failed: {verb} {path}: {exc}")
            raise TransportError(
                f"network error: {verb} {path}: {exc}",
                code="TRANSPORT_NETWORK_ERROR",
                retryable=True,
            ) from exc

        status_code = int(getattr(resp, "status_code", 0) or 0)
        return RemoteReply(
            status_code=status_code,
            body=self._parse_body(resp, verb, path, status_code),
            headers=dict(getattr(resp, "headers", {}) or {}),
        )

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.settings.user_agent}

    @staticmethod
    def _parse_body(resp: Any, verb: str, path: str, status_code: int) -> Any:
        text = str(getattr(resp, "text", "") or "").strip()
        if not text:
            return None
        try:
            # Bare scalars ("true", "42") are valid replies too.
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise TransportError(
                f"bad response: non-json body for {verb} {path}",
                code="TRANSPORT_BAD_RESPONSE",
                status_code=status_code or None,
                retryable=status_code >= 500,
            ) from exc
