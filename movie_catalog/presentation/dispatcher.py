from http import HTTPStatus
from typing import Any, Callable, Optional

from pydantic import TypeAdapter
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.proxy import JSON_HEADERS, ProxyRequest, ProxyResponse
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.search_movies import SearchMoviesUseCase
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.exceptions import NotFoundError, ValidationError
from movie_catalog.domain.models.movie import MAX_MOVIE_ID
from movie_catalog.domain.outcome import BadRequest, Conflict, InternalError, NotFound, Ok, Outcome
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_catalog.infrastructure.persistence.database import Database

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})

_json = TypeAdapter(Any)

RepositoryFactory = Callable[[AsyncSession], MovieRepository]


def json_response(status: int, payload: Any) -> ProxyResponse:
    return ProxyResponse(
        status_code=int(status),
        body=_json.dump_json(payload).decode("utf-8"),
        headers=dict(JSON_HEADERS),
    )


def method_not_allowed() -> ProxyResponse:
    return ProxyResponse(status_code=int(HTTPStatus.METHOD_NOT_ALLOWED), body="Method not allowed")


def to_response(outcome: Outcome) -> ProxyResponse:
    """Translate an outcome into a proxy response.

    Every error, 404 included, is a JSON ``{"message": ...}`` body with the JSON
    content type, so clients can parse any non-405 answer the same way. Only
    the 405 from ``method_not_allowed`` stays plain text.
    """
    if isinstance(outcome, Ok):
        return json_response(outcome.status, outcome.payload)
    if isinstance(outcome, NotFound):
        return json_response(HTTPStatus.NOT_FOUND, Message(message=outcome.message))
    if isinstance(outcome, BadRequest):
        return json_response(HTTPStatus.BAD_REQUEST, Message(message=outcome.message))
    if isinstance(outcome, Conflict):
        return json_response(HTTPStatus.CONFLICT, Message(message=outcome.message))
    if isinstance(outcome, InternalError):
        return json_response(HTTPStatus.INTERNAL_SERVER_ERROR, Message(message=outcome.message))
    raise TypeError(f"Unknown outcome: {outcome!r}")


def parse_movie_id(request: ProxyRequest) -> int:
    """Read the ``id`` path parameter as a non-negative integer.

    Only plain ASCII digits are accepted. A well-formed id beyond the id column
    range cannot match a stored movie and raises ``NotFoundError``.
    """
    raw_id = request.path_parameter("id")
    if raw_id is None:
        raise ValidationError("Path parameter 'id' is required")
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise ValidationError(f"Path parameter 'id' must be an integer, got '{raw_id}'")
    movie_id = int(raw_id)
    if movie_id > MAX_MOVIE_ID:
        raise NotFoundError(f"Movie id {raw_id} is out of range")
    return movie_id


class RequestDispatcher:
    """Routes one proxy request to a movie use case and shapes the response.

    GET picks search when a ``name`` path parameter is present, then
    fetch-by-id when ``id`` is present, and lists everything otherwise.
    POST, PUT and DELETE map to create, update and delete. Any other method
    gets a plain-text 405 without a JSON content type.

    The ``database`` handle is built once by the caller and shared by every
    request; each request runs in its own session.
    """

    def __init__(
        self,
        database: Database,
        repository_factory: RepositoryFactory = SQLAlchemyMovieRepository,
        logger: Optional[LoggerPort] = None,
    ):
        self.database = database
        self.repository_factory = repository_factory
        self.logger = logger or StdLoggerAdapter(__name__)

    async def dispatch(self, request: ProxyRequest) -> ProxyResponse:
        if request.method not in SUPPORTED_METHODS:
            self.logger.warning(f"Rejecting unsupported method {request.method}")
            return method_not_allowed()

        try:
            async with self.database.session() as session:
                outcome = await self._route(request, self.repository_factory(session))
        except ValidationError as e:
            outcome = BadRequest(str(e))
        except NotFoundError:
            outcome = NotFound()
        except Exception:
            self.logger.exception(f"Unhandled error while serving {request.method} {request.path_parameters}")
            outcome = InternalError()

        if not isinstance(outcome, Ok):
            self.logger.warning(f"{request.method} {request.path_parameters} -> {type(outcome).__name__}")
        return to_response(outcome)

    async def _route(self, request: ProxyRequest, repository: MovieRepository) -> Outcome:
        method = request.method

        if method == "GET":
            if request.has_path_parameter("name"):
                self.logger.info("GET -> search movies by name")
                return await SearchMoviesUseCase(repository).execute(request.path_parameter("name") or "")
            if request.has_path_parameter("id"):
                self.logger.info("GET -> get movie by id")
                return await GetMovieUseCase(repository).execute(parse_movie_id(request))
            self.logger.info("GET -> list movies")
            return await GetMoviesUseCase(repository).execute()

        if method == "POST":
            self.logger.info("POST -> create movie")
            return await CreateMovieUseCase(repository).execute(request.decoded_body())

        if method == "PUT":
            self.logger.info("PUT -> update movie")
            movie_id = parse_movie_id(request)
            return await UpdateMovieUseCase(repository).execute(movie_id, request.decoded_body())

        self.logger.info("DELETE -> delete movie")
        return await DeleteMovieUseCase(repository).execute(parse_movie_id(request))
