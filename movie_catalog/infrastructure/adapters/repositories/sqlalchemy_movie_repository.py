from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from movie_catalog.domain.exceptions import ConflictError, NotFoundError, RepositoryError
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.models.movie import MovieRatings
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.logging.logger import Logger
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie

logger = Logger.get_logger(__name__)


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            name=sql_movie.name,
            director=sql_movie.director,
            year=sql_movie.year,
            genre=sql_movie.genre,
            description=sql_movie.description,
        )

    def _to_movie_ratings(self, sql_movie: SQLMovie) -> MovieRatings:
        return MovieRatings(
            movie=self._to_domain(sql_movie),
            ratings=[row.rating for row in sql_movie.ratings],
        )

    def _with_ratings(self):
        return select(SQLMovie).options(selectinload(SQLMovie.ratings)).order_by(SQLMovie.id)

    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        return self._to_domain(movie) if movie else None

    async def get_by_id_with_ratings(self, movie_id: int) -> Optional[MovieRatings]:
        movie = await self.session.scalar(self._with_ratings().where(SQLMovie.id == movie_id))
        return self._to_movie_ratings(movie) if movie else None

    async def get_all_with_ratings(self) -> List[MovieRatings]:
        result = await self.session.scalars(self._with_ratings())
        return [self._to_movie_ratings(movie) for movie in result.all()]

    async def search_by_name_with_ratings(self, name: str) -> List[MovieRatings]:
        query = self._with_ratings().where(SQLMovie.name.contains(name, autoescape=True))
        result = await self.session.scalars(query)
        return [self._to_movie_ratings(movie) for movie in result.all()]

    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            id=movie.id,
            name=movie.name,
            director=movie.director,
            year=movie.year,
            genre=movie.genre,
            description=movie.description,
        )
        self.session.add(sql_movie)
        await self._commit(conflict_message=f"Movie with id {movie.id} already exists")
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def update(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie.id))
        if not sql_movie:
            raise NotFoundError(f"Movie with id {movie.id} not found")

        sql_movie.name = movie.name
        sql_movie.director = movie.director
        sql_movie.year = movie.year
        sql_movie.genre = movie.genre
        sql_movie.description = movie.description

        await self._commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def delete(self, movie_id: int) -> bool:
        movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        if not movie:
            return False

        await self.session.delete(movie)
        await self._commit()
        return True

    async def _commit(self, conflict_message: str = "Conflicting movie row") -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Integrity error on commit: {e.orig}")
            raise ConflictError(conflict_message) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Database error: {e}") from e
