from typing import List

from movie_catalog.applications.interfaces.dtos.movie import MovieWithRatings
from movie_catalog.domain.outcome import Ok
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self) -> Ok[List[MovieWithRatings]]:
        movies = await self.movie_repository.get_all_with_ratings()
        return Ok([MovieWithRatings.from_domain(movie) for movie in movies])
