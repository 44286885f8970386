"""
Top-level package for the Movie Chat API.

This file makes ``movie_chat_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``movie_chat_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
