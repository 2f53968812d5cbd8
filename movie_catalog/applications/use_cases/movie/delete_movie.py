from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.outcome import InternalError, NotFound, Ok, Outcome
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> Outcome:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            return NotFound()

        try:
            deleted = await self.movie_repository.delete(movie_id)
        except DomainError:
            logger.exception(f"Failed to delete movie {movie_id}")
            return InternalError()

        if not deleted:
            return NotFound()

        logger.info(f"Movie deleted: {movie_id}")
        return Ok(Message(message="Movie deleted successfully"))
