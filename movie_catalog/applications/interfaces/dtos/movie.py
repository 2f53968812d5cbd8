from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from movie_catalog.domain.exceptions import ValidationError
from movie_catalog.domain.models.movie import MAX_MOVIE_ID, MAX_STORED_INT, MIN_STORED_INT, Movie, MovieRatings


class MovieSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = Field(default=None, ge=0, le=MAX_MOVIE_ID)
    name: str
    director: Optional[str] = None
    year: Optional[int] = Field(default=None, ge=MIN_STORED_INT, le=MAX_STORED_INT)
    genre: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_body(cls, body: Optional[str]) -> "MovieSchema":
        """Parse a raw JSON request body, raising ``ValidationError`` when it is unusable."""
        if body is None or not body.strip():
            raise ValidationError("Request body is required")
        try:
            return cls.model_validate_json(body)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid movie payload: {e.error_count()} error(s)") from e

    def to_domain(self, movie_id: Optional[int] = None) -> Movie:
        return Movie(
            id=movie_id if movie_id is not None else self.id,
            name=self.name,
            director=self.director,
            year=self.year,
            genre=self.genre,
            description=self.description,
        )


class MoviePublic(BaseModel):
    id: int
    name: str
    director: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    description: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_domain(cls, movie: Movie) -> "MoviePublic":
        return cls(**movie.model_dump())


class MovieWithRatings(BaseModel):
    movie: MoviePublic
    ratings: List[int]

    @classmethod
    def from_domain(cls, movie_ratings: MovieRatings) -> "MovieWithRatings":
        return cls(movie=MoviePublic.from_domain(movie_ratings.movie), ratings=list(movie_ratings.ratings))
