"""Web API for the resolver."""

from batchload.web.app import create_app

__all__ = ["create_app"]
