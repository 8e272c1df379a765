"""Clients for services ModelHub talks to."""

from .backend import BackendClient, BackendError

__all__ = ["BackendClient", "BackendError"]
