from typing import Optional

from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from movie_catalog.domain.exceptions import ConflictError, NotFoundError, RepositoryError, ValidationError
from movie_catalog.domain.outcome import BadRequest, Conflict, InternalError, NotFound, Ok, Outcome
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateMovieUseCase:
    """Replace every column of an existing movie.

    The id in the path always wins over any id carried by the body.
    """

    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int, body: Optional[str]) -> Outcome:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            return NotFound()

        try:
            movie_data = MovieSchema.from_body(body)
        except ValidationError as e:
            return BadRequest(str(e))

        if movie_data.id is not None and movie_data.id != movie_id:
            logger.info(f"Ignoring body id {movie_data.id} in favour of path id {movie_id}")

        try:
            updated_movie = await self.movie_repository.update(movie_data.to_domain(movie_id=movie_id))
        except NotFoundError:
            return NotFound()
        except ConflictError as e:
            return Conflict(str(e))
        except RepositoryError:
            logger.exception(f"Failed to update movie {movie_id}")
            return InternalError()

        return Ok(MoviePublic.from_domain(updated_movie))
