"""Serverless entry point.

The hosting runtime calls :func:`handler` once per request. The database
handle, the dispatcher and the event loop are created on the first call and
reused by every later invocation served by the same process.
"""

import asyncio
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.proxy import ProxyRequest
from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.infrastructure.persistence.database import Database
from movie_catalog.presentation.dispatcher import RequestDispatcher, json_response

logger = Logger.get_logger(__name__)


class ServerlessApp:
    def __init__(self, dispatcher: RequestDispatcher, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.dispatcher = dispatcher
        # pooled connections are bound to the loop that opened them
        self.loop = loop or asyncio.new_event_loop()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ServerlessApp":
        database = Database.from_settings(settings)
        return cls(RequestDispatcher(database))

    def __call__(self, event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
        return self.loop.run_until_complete(self.handle(event))

    async def handle(self, event: Dict[str, Any]) -> Dict[str, Any]:
        try:
            request = ProxyRequest.model_validate(event)
        except PydanticValidationError as e:
            logger.warning(f"Malformed proxy event: {e.error_count()} error(s)")
            return json_response(400, Message(message="Malformed request event")).to_event()

        response = await self.dispatcher.dispatch(request)
        return response.to_event()

    def close(self) -> None:
        self.loop.run_until_complete(self.dispatcher.database.dispose())
        self.loop.close()


_app: Optional[ServerlessApp] = None


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    global _app
    if _app is None:
        setup_logging()
        _app = ServerlessApp.from_settings()
    return _app(event, context)
