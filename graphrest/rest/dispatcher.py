"""Single call site for every legacy REST method invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from graphrest.errors import raise_for_error
from graphrest.rest.registry import is_read_only
from graphrest.transport.protocol import Transport


@dataclass(slots=True)
class Invocation:
    """One outbound method call, built fresh per rest_call."""

    method_name: str
    parameters: dict[str, Any] = field(default_factory=dict)
    http_verb: str = "GET"
    call_options: dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return f"method/{self.method_name}"

    def transport_options(self) -> dict[str, Any]:
        options = dict(self.call_options)
        options["rest_api"] = True
        # Mutating verbs never take the read-only path.
        options["read_only"] = is_read_only(self.method_name) and str(self.http_verb).upper() == "GET"
        return options


def build_invocation(
    method_name: str,
    parameters: dict[str, Any] | None = None,
    call_options: dict[str, Any] | None = None,
    http_verb: str = "GET",
) -> Invocation:
    """Apply dispatcher defaults; the forced format always wins."""
    params = dict(parameters or {})
    params["format"] = "json"
    return Invocation(
        method_name=method_name,
        parameters=params,
        http_verb=http_verb,
        call_options=dict(call_options or {}),
    )


class RestDispatcher:
    """Issues legacy REST invocations through a transport."""

    def __init__(self, transport: Transport):
        self.transport = transport

    def rest_call(
        self,
        method_name: str,
        parameters: dict[str, Any] | None = None,
        call_options: dict[str, Any] | None = None,
        http_verb: str = "GET",
    ) -> Any:
        """Call ``method_name`` and return the parsed body; raises APIError on error replies."""
        invocation = build_invocation(method_name, parameters, call_options, http_verb)
        options = invocation.transport_options()
        logger.debug(
            f"rest_call {invocation.method_name} verb={invocation.http_verb} read_only={options['read_only']}"
        )
        reply = self.transport.perform(
            invocation.path,
            invocation.parameters,
            invocation.http_verb,
            options,
        )
        return raise_for_error(reply)
