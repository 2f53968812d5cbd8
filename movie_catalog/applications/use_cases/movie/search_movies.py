from typing import List

from movie_catalog.applications.interfaces.dtos.movie import MovieWithRatings
from movie_catalog.domain.outcome import Ok
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class SearchMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, name: str) -> Ok[List[MovieWithRatings]]:
        movies = await self.movie_repository.search_by_name_with_ratings(name)
        logger.debug(f"Search for '{name}' matched {len(movies)} movie(s)")
        return Ok([MovieWithRatings.from_domain(movie) for movie in movies])
