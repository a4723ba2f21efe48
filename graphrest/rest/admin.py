"""Administrative passthrough methods."""

from __future__ import annotations

import json
from typing import Any

SET_APP_PROPERTIES_METHOD = "admin.setAppProperties"


class AdminMixin:
    """Administrative calls; the host class provides ``rest_call``."""

    def set_app_properties(
        self,
        properties: dict[str, Any],
        parameters: dict[str, Any] | None = None,
        http_options: dict[str, Any] | None = None,
    ) -> Any:
        """Set app-level properties; requires the app's access token."""
        args = {**(parameters or {}), "properties": json.dumps(properties)}
        return self.rest_call(SET_APP_PROPERTIES_METHOD, args, http_options or {}, "POST")
