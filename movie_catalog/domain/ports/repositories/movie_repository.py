from abc import ABC, abstractmethod
from typing import List, Optional

from movie_catalog.domain.models.movie import Movie, MovieRatings


class MovieRepository(ABC):
    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_by_id_with_ratings(self, movie_id: int) -> Optional[MovieRatings]:
        pass

    @abstractmethod
    async def get_all_with_ratings(self) -> List[MovieRatings]:
        pass

    @abstractmethod
    async def search_by_name_with_ratings(self, name: str) -> List[MovieRatings]:
        pass

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> bool:
        pass
