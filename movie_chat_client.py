"""Movie Chat API client.

A thin wrapper around the Movie Chat HTTP API built on ``requests``.
Every method returns a tuple ``(data, error)``: on success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with ``status_code``, ``error``
(the error kind reported by the server, when available) and
``message``.

Example::

    api = MovieChatAPI(base_url="http://localhost:8081")
    movies, error = api.list_movies()
    message, error = api.post_message(movies[0]["id"], "great movie")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class MovieChatAPI:
    """Client for the movie catalog and chat endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any prefix, e.g.
                ``http://localhost:8081``.
            timeout: Seconds to wait for each response.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/movies``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            kind = None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    kind = err_json.get("error")
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "error": kind, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "error": None, "message": str(exc)}

    def list_movies(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the movie catalog."""
        data, error = self._request("GET", "/movies")
        if error:
            return [], error
        return data or [], None

    def list_messages(self, movie_id: int) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the messages of a movie, oldest first."""
        data, error = self._request("GET", f"/chat/{movie_id}")
        if error:
            return [], error
        return data or [], None

    def post_message(self, movie_id: int, content: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Post ``content`` to the chat of ``movie_id``.

        Returns:
            A tuple ``(message, error)`` where ``message`` is the stored
            message including its ``id`` and ``created_at``.
        """
        return self._request("POST", "/chat", json_body={"movie_id": movie_id, "content": content})
