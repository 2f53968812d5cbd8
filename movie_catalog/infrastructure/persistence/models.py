from typing import List, Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, registry, relationship

table_registry = registry()


@table_registry.mapped_as_dataclass
class UserMovieRating:
    """Association row between a user and a movie.

    (user_id, movie_id) is not unique; every matching row takes part in
    rating aggregation.
    """

    __tablename__ = "user_movie_ratings"

    id: Mapped[int] = mapped_column(init=False, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    movie_id: Mapped[int] = mapped_column(ForeignKey("movies.id", ondelete="CASCADE"))
    rating: Mapped[int]

    user: Mapped["User"] = relationship("User", back_populates="ratings", init=False)
    movie: Mapped["Movie"] = relationship("Movie", back_populates="ratings", init=False)


@table_registry.mapped_as_dataclass
class User:
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), default=None)

    ratings: Mapped[List[UserMovieRating]] = relationship(
        "UserMovieRating", back_populates="user", cascade="all, delete-orphan", default_factory=list, init=False
    )


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    name: Mapped[str] = mapped_column(String(255), index=True)
    # None lets the store assign the key
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True, default=None)
    director: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    year: Mapped[Optional[int]] = mapped_column(default=None)
    genre: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    description: Mapped[Optional[str]] = mapped_column(Text, default=None)

    ratings: Mapped[List[UserMovieRating]] = relationship(
        "UserMovieRating", back_populates="movie", cascade="all, delete-orphan", default_factory=list, init=False
    )
