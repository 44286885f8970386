"""
FastAPI dependencies.

The chat service is built once at startup and stored on
``app.state``; endpoints receive it through ``Depends`` instead of
importing a module-level instance.
"""

from fastapi import Request

from movie_chat_api.app.services.chat_service import ChatService


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service
