"""Legacy REST dialect: dispatch, FQL and admin calls."""

from graphrest.rest.api import RestAPI
from graphrest.rest.dispatcher import Invocation, RestDispatcher, build_invocation
from graphrest.rest.registry import READ_ONLY_METHODS

__all__ = ["READ_ONLY_METHODS", "Invocation", "RestAPI", "RestDispatcher", "build_invocation"]
