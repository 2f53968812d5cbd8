from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from pydantic import ValidationError as SettingsValidationError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from movie_catalog.domain.exceptions import ConfigurationError
from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class Database:
    """Store client shared by every request served by one process.

    The engine (and its connection pool) lives as long as the instance; each
    request borrows a short-lived session through :meth:`session`.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any):
        if not url:
            raise ConfigurationError("DATABASE_CONNECTION_STRING is empty")
        self._engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Database":
        if settings is None:
            try:
                settings = Settings()
            except SettingsValidationError as e:
                raise ConfigurationError(f"Invalid database settings: {e}") from e
        logger.info(f"Opening database engine for {_safe_url(settings.DATABASE_CONNECTION_STRING)}")
        return cls(settings.DATABASE_CONNECTION_STRING, echo=settings.DATABASE_ECHO)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            yield session

    async def dispose(self) -> None:
        await self._engine.dispose()


def _safe_url(url: str) -> str:
    # strip credentials before logging
    scheme, sep, rest = url.partition("://")
    if not sep:
        return "<unparsed url>"
    return f"{scheme}://{rest.rsplit('@', 1)[-1]}"
