from typing import List, Optional

from pydantic import BaseModel, Field

# Movie ids and years are stored in 32-bit INTEGER columns.
MIN_STORED_INT = -(2**31)
MAX_STORED_INT = 2**31 - 1
MAX_MOVIE_ID = MAX_STORED_INT


class Movie(BaseModel):
    id: Optional[int] = None
    name: str
    director: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    description: Optional[str] = None


class MovieRatings(BaseModel):
    """A movie together with the values of every rating that references it."""

    movie: Movie
    ratings: List[int] = Field(default_factory=list)
