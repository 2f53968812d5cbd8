"""HTTP routes that feed the proxy dispatcher.

Each route only translates the incoming request into a ``ProxyRequest``; all
routing decisions and status codes come from ``RequestDispatcher``.
"""

import base64
from typing import Annotated, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response

from movie_catalog.applications.interfaces.dtos.proxy import ProxyRequest
from movie_catalog.infrastructure.config.dependencies import get_dispatcher
from movie_catalog.presentation.dispatcher import RequestDispatcher

router = APIRouter(prefix="/movies", tags=["movies"])

DispatcherDep = Annotated[RequestDispatcher, Depends(get_dispatcher)]

ROUTED_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]


async def _forward(request: Request, dispatcher: RequestDispatcher, path_parameters: Optional[Dict[str, str]]):
    raw_body = await request.body()
    body, is_base64_encoded = None, False
    if raw_body:
        try:
            body = raw_body.decode("utf-8")
        except UnicodeDecodeError:
            # non-UTF-8 bytes travel base64-encoded and fail decoding in the dispatcher
            body, is_base64_encoded = base64.b64encode(raw_body).decode("ascii"), True
    proxy_request = ProxyRequest(
        method=request.method,
        path_parameters=path_parameters,
        body=body,
        is_base64_encoded=is_base64_encoded,
    )
    result = await dispatcher.dispatch(proxy_request)
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)


@router.api_route("", methods=ROUTED_METHODS)
@router.api_route("/", methods=ROUTED_METHODS, include_in_schema=False)
async def movies_collection(request: Request, dispatcher: DispatcherDep):
    return await _forward(request, dispatcher, None)


@router.api_route("/search/{name}", methods=ROUTED_METHODS)
async def movies_by_name(name: str, request: Request, dispatcher: DispatcherDep):
    return await _forward(request, dispatcher, {"name": name})


@router.api_route("/{movie_id}", methods=ROUTED_METHODS)
async def movie_item(movie_id: str, request: Request, dispatcher: DispatcherDep):
    return await _forward(request, dispatcher, {"id": movie_id})
