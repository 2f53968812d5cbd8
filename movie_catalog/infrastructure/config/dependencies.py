from fastapi import Request

from movie_catalog.presentation.dispatcher import RequestDispatcher


def get_dispatcher(request: Request) -> RequestDispatcher:
    return request.app.state.dispatcher
