"""Application layer: bootstrap and shared-service wiring."""

from .bootstrap import AppContext, create_app, get_config_store, shutdown  # noqa: F401

__all__ = ["AppContext", "create_app", "get_config_store", "shutdown"]
