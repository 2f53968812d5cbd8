from http import HTTPStatus
from typing import Optional

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.domain.exceptions import ConflictError, RepositoryError, ValidationError
from movie_catalog.domain.outcome import BadRequest, Conflict, InternalError, Ok, Outcome
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, body: Optional[str]) -> Outcome:
        try:
            movie_data = MovieSchema.from_body(body)
        except ValidationError as e:
            return BadRequest(str(e))

        if movie_data.id is not None and await self.movie_repository.get_by_id(movie_data.id):
            return Conflict(f"Movie with id {movie_data.id} already exists")

        try:
            created_movie = await self.movie_repository.create(movie_data.to_domain())
        except ConflictError as e:
            return Conflict(str(e))
        except RepositoryError:
            logger.exception(f"Failed to create movie '{movie_data.name}'")
            return InternalError()

        logger.info(f"Movie created: {created_movie.id}")
        return Ok(MoviePublic.from_domain(created_movie), status=HTTPStatus.CREATED)
