from http import HTTPStatus

import pytest

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.applications.interfaces.dtos.movie import MoviePublic, MovieWithRatings
from movie_catalog.applications.use_cases.movie.create_movie import CreateMovieUseCase
from movie_catalog.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movie import GetMovieUseCase
from movie_catalog.applications.use_cases.movie.get_movies import GetMoviesUseCase
from movie_catalog.applications.use_cases.movie.search_movies import SearchMoviesUseCase
from movie_catalog.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from movie_catalog.domain.exceptions import ConflictError, RepositoryError
from movie_catalog.domain.outcome import BadRequest, Conflict, InternalError, NotFound, Ok

from tests.factories import movie_factory


class TestGetMoviesUseCase:
    @pytest.mark.asyncio
    async def test_list_enriches_every_movie_with_ratings(self, mock_movie_repository):
        mock_movie_repository.get_all_with_ratings.return_value = [
            movie_factory.create_movie_ratings(id=1, name="Matrix", ratings=(5, 4)),
            movie_factory.create_movie_ratings(id=2, name="Alien"),
        ]

        result = await GetMoviesUseCase(mock_movie_repository).execute()

        assert isinstance(result, Ok)
        assert result.status == HTTPStatus.OK
        assert [item.movie.name for item in result.payload] == ["Matrix", "Alien"]
        assert result.payload[0].ratings == [5, 4]
        assert result.payload[1].ratings == []

    @pytest.mark.asyncio
    async def test_list_empty_store(self, mock_movie_repository):
        mock_movie_repository.get_all_with_ratings.return_value = []

        result = await GetMoviesUseCase(mock_movie_repository).execute()

        assert result == Ok([])


class TestSearchMoviesUseCase:
    @pytest.mark.asyncio
    async def test_search_passes_query_through(self, mock_movie_repository):
        mock_movie_repository.search_by_name_with_ratings.return_value = [
            movie_factory.create_movie_ratings(id=3, name="The Matrix Reloaded", ratings=(3,)),
        ]

        result = await SearchMoviesUseCase(mock_movie_repository).execute("Matrix")

        assert isinstance(result, Ok)
        assert result.payload[0].movie.id == 3
        mock_movie_repository.search_by_name_with_ratings.assert_called_once_with("Matrix")

    @pytest.mark.asyncio
    async def test_search_without_matches_is_ok_not_not_found(self, mock_movie_repository):
        mock_movie_repository.search_by_name_with_ratings.return_value = []

        result = await SearchMoviesUseCase(mock_movie_repository).execute("nothing")

        assert isinstance(result, Ok)
        assert result.payload == []


class TestGetMovieUseCase:
    @pytest.mark.asyncio
    async def test_get_existing_movie(self, mock_movie_repository):
        mock_movie_repository.get_by_id_with_ratings.return_value = movie_factory.create_movie_ratings(ratings=(1, 1))

        result = await GetMovieUseCase(mock_movie_repository).execute(1)

        assert isinstance(result, Ok)
        assert isinstance(result.payload, MovieWithRatings)
        assert result.payload.movie.name == "Matrix"
        assert result.payload.ratings == [1, 1]

    @pytest.mark.asyncio
    async def test_get_missing_movie(self, mock_movie_repository):
        mock_movie_repository.get_by_id_with_ratings.return_value = None

        result = await GetMovieUseCase(mock_movie_repository).execute(42)

        assert result == NotFound()


class TestCreateMovieUseCase:
    @pytest.mark.asyncio
    async def test_create_keeps_caller_supplied_id(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = None
        mock_movie_repository.create.return_value = movie_factory.create_domain_movie(id=7, name="Heat")

        result = await CreateMovieUseCase(mock_movie_repository).execute(
            movie_factory.create_movie_body(id=7, name="Heat")
        )

        assert isinstance(result, Ok)
        assert result.status == HTTPStatus.CREATED
        assert isinstance(result.payload, MoviePublic)
        created = mock_movie_repository.create.call_args.args[0]
        assert created.id == 7
        assert created.name == "Heat"

    @pytest.mark.asyncio
    async def test_create_without_id_skips_existence_check(self, mock_movie_repository):
        mock_movie_repository.create.return_value = movie_factory.create_domain_movie(id=12, name="Heat")

        result = await CreateMovieUseCase(mock_movie_repository).execute('{"name": "Heat"}')

        assert isinstance(result, Ok)
        assert result.payload.id == 12
        mock_movie_repository.get_by_id.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            None,
            "",
            "not json",
            '{"id": 1}',
            '{"name": "x", "year": "soon"}',
            '{"id": -1, "name": "x"}',
            '{"id": 2147483648, "name": "x"}',
            '{"name": "x", "year": 99999999999}',
        ],
    )
    async def test_create_rejects_unusable_body(self, mock_movie_repository, body):
        result = await CreateMovieUseCase(mock_movie_repository).execute(body)

        assert isinstance(result, BadRequest)
        mock_movie_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_duplicate_id_is_conflict(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=1)

        result = await CreateMovieUseCase(mock_movie_repository).execute(movie_factory.create_movie_body(id=1))

        assert isinstance(result, Conflict)
        mock_movie_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_store_conflict_is_conflict(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = None
        mock_movie_repository.create.side_effect = ConflictError("Movie with id 1 already exists")

        result = await CreateMovieUseCase(mock_movie_repository).execute(movie_factory.create_movie_body())

        assert result == Conflict("Movie with id 1 already exists")

    @pytest.mark.asyncio
    async def test_create_repository_failure(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = None
        mock_movie_repository.create.side_effect = RepositoryError("boom")

        result = await CreateMovieUseCase(mock_movie_repository).execute(movie_factory.create_movie_body())

        assert isinstance(result, InternalError)


class TestUpdateMovieUseCase:
    @pytest.mark.asyncio
    async def test_update_forces_path_id(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=1)
        mock_movie_repository.update.return_value = movie_factory.create_domain_movie(id=1, name="Matrix Reloaded")

        result = await UpdateMovieUseCase(mock_movie_repository).execute(
            1, movie_factory.create_movie_body(id=99, name="Matrix Reloaded")
        )

        assert isinstance(result, Ok)
        assert result.payload.id == 1
        assert result.payload.name == "Matrix Reloaded"
        sent = mock_movie_repository.update.call_args.args[0]
        assert sent.id == 1

    @pytest.mark.asyncio
    async def test_update_replaces_the_full_row(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=1)
        mock_movie_repository.update.return_value = movie_factory.create_domain_movie(id=1, director=None)

        await UpdateMovieUseCase(mock_movie_repository).execute(1, '{"name": "Matrix"}')

        sent = mock_movie_repository.update.call_args.args[0]
        assert sent.director is None
        assert sent.year is None

    @pytest.mark.asyncio
    async def test_update_missing_movie(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = None

        result = await UpdateMovieUseCase(mock_movie_repository).execute(5, movie_factory.create_movie_body())

        assert result == NotFound()
        mock_movie_repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_missing_movie_wins_over_bad_body(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = None

        result = await UpdateMovieUseCase(mock_movie_repository).execute(5, "garbage")

        assert isinstance(result, NotFound)

    @pytest.mark.asyncio
    async def test_update_bad_body(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=1)

        result = await UpdateMovieUseCase(mock_movie_repository).execute(1, "garbage")

        assert isinstance(result, BadRequest)
        mock_movie_repository.update.assert_not_called()


class TestDeleteMovieUseCase:
    @pytest.mark.asyncio
    async def test_delete_existing_movie(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=1)
        mock_movie_repository.delete.return_value = True

        result = await DeleteMovieUseCase(mock_movie_repository).execute(1)

        assert result == Ok(Message(message="Movie deleted successfully"))
        mock_movie_repository.delete.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_delete_missing_movie(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = None

        result = await DeleteMovieUseCase(mock_movie_repository).execute(1)

        assert result == NotFound()
        mock_movie_repository.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_repository_failure(self, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=1)
        mock_movie_repository.delete.side_effect = RepositoryError("boom")

        result = await DeleteMovieUseCase(mock_movie_repository).execute(1)

        assert isinstance(result, InternalError)
