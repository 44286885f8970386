"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database handle and
errors), ``schemas`` (wire payloads), ``services`` (store and chat
service) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
