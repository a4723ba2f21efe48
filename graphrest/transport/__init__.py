"""Transports that carry REST invocations to the remote service."""

from graphrest.transport.http import HttpTransport, TransportError
from graphrest.transport.protocol import RemoteReply, Transport

__all__ = ["HttpTransport", "RemoteReply", "Transport", "TransportError"]
