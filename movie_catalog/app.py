from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.persistence.database import Database
from movie_catalog.presentation.dispatcher import RequestDispatcher
from movie_catalog.presentation.routers import movies

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = Database.from_settings()
    app.state.dispatcher = RequestDispatcher(database)
    try:
        yield
    finally:
        await database.dispose()


app = FastAPI(lifespan=lifespan)

app.include_router(movies.router)


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie catalog API"}
