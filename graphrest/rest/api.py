"""Public client for the legacy REST dialect."""

from __future__ import annotations

from graphrest.config.loader import load_settings
from graphrest.config.schema import Settings
from graphrest.rest.admin import AdminMixin
from graphrest.rest.dispatcher import RestDispatcher
from graphrest.rest.fql import FQLMixin
from graphrest.transport.http import HttpTransport
from graphrest.transport.protocol import Transport


class RestAPI(FQLMixin, AdminMixin, RestDispatcher):
    """
    Legacy REST client.

    Every operation funnels through ``rest_call``. Without an explicit
    transport, an ``HttpTransport`` is built from ``settings`` (or from
    ``load_settings()`` when none are given).
    """

    def __init__(self, transport: Transport | None = None, settings: Settings | None = None):
        if transport is None:
            transport = HttpTransport(settings or load_settings())
        super().__init__(transport)
