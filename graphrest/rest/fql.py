"""FQL single-query and multi-query calls."""

from __future__ import annotations

import json
from typing import Any

FQL_QUERY_METHOD = "fql.query"
FQL_MULTIQUERY_METHOD = "fql.multiquery"


def simplify_multiquery(raw_results: Any) -> dict[str, Any]:
    """Map ``[{"name", "fql_result_set"}, ...]`` to ``{name: fql_result_set}``.

    An empty reply, or one that is not a list of results, maps to ``{}``.
    """
    if not isinstance(raw_results, list):
        return {}
    return {entry["name"]: entry["fql_result_set"] for entry in raw_results}


class FQLMixin:
    """Query helpers; the host class provides ``rest_call``."""

    def fql_query(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
        http_options: dict[str, Any] | None = None,
    ) -> Any:
        """Run one FQL query and return its rows as sent by the server."""
        args = {**(parameters or {}), "query": query}
        return self.rest_call(FQL_QUERY_METHOD, args, http_options or {})

    def fql_multiquery(
        self,
        queries: Any,
        parameters: dict[str, Any] | None = None,
        http_options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Run several named queries in one call.

        Queries may reference each other's results (``#query1``). The reply is
        returned keyed by query name.
        """
        args = {**(parameters or {}), "queries": json.dumps(queries)}
        results = self.rest_call(FQL_MULTIQUERY_METHOD, args, http_options or {})
        return simplify_multiquery(results)
