"""Transport contract consumed by the REST dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(slots=True)
class RemoteReply:
    """Parsed reply handed back by a transport for a single call."""

    status_code: int
    body: Any
    headers: dict[str, str] = field(default_factory=dict)


class Transport(Protocol):
    """Performs one request against the remote service.

    ``transport_options`` carries routing directives: ``rest_api`` selects the
    legacy method dialect, ``read_only`` marks side-effect-free calls, and any
    caller keys (``beta`` and so on) are passed through.
    """

    def perform(
        self,
        path: str,
        parameters: dict[str, Any],
        http_verb: str,
        transport_options: dict[str, Any],
    ) -> RemoteReply: ...
