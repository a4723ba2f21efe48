"""Pytest fixtures shared by the REST tests."""

from typing import Any

import pytest

from graphrest.transport.protocol import RemoteReply


class RecordingTransport:
    """Transport double that records calls and replays a canned reply."""

    def __init__(self, reply: RemoteReply | None = None):
        self.reply = reply or RemoteReply(200, {}, {})
        self.calls: list[dict[str, Any]] = []

    def perform(
        self,
        path: str,
        parameters: dict[str, Any],
        http_verb: str,
        transport_options: dict[str, Any],
    ) -> RemoteReply:
        self.calls.append(
            {
                "path": path,
                "parameters": parameters,
                "http_verb": http_verb,
                "transport_options": transport_options,
            }
        )
        return self.reply

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
