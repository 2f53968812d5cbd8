from typing import Union

from movie_catalog.applications.interfaces.dtos.movie import MovieWithRatings
from movie_catalog.domain.outcome import NotFound, Ok
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_id: int) -> Union[Ok[MovieWithRatings], NotFound]:
        movie = await self.movie_repository.get_by_id_with_ratings(movie_id)
        if not movie:
            return NotFound()

        return Ok(MovieWithRatings.from_domain(movie))
