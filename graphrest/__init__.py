"""graphrest - client adapter for the legacy REST dialect of the social graph API."""

__version__ = "0.1.0"

from graphrest.errors import APIError, GraphRestError
from graphrest.rest.api import RestAPI

__all__ = ["APIError", "GraphRestError", "RestAPI", "__version__"]
