"""
Request pipeline run in front of every route.

A stage is an async callable taking the request and returning either ``None``
(continue with the next stage) or a ``Response`` (short-circuit, nothing after
it runs). When every stage passes, the matched route handler runs. Anything the
stages or the handler raise and nobody else handled ends up as a 500.
"""

import logging
from typing import Awaitable, Callable, Iterable, List, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

Stage = Callable[[Request], Awaitable[Optional[Response]]]
CallNext = Callable[[Request], Awaitable[Response]]


async def log_request(request: Request) -> Optional[Response]:
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    logger.info("%s %s", request.method, target)
    return None


class Authorizer:
    """Static shared-secret check: reads are open, everything else needs the token."""

    def __init__(self, expected: str):
        self.expected = expected

    async def __call__(self, request: Request) -> Optional[Response]:
        if request.method == "GET":
            return None
        if request.headers.get("authorization") == self.expected:
            return None
        return JSONResponse(status_code=401, content={"message": "Unauthorized"})


class RequestPipeline:
    def __init__(self, stages: Iterable[Stage]):
        self.stages: List[Stage] = list(stages)

    async def __call__(self, request: Request, call_next: CallNext) -> Response:
        try:
            for stage in self.stages:
                response = await stage(request)
                if response is not None:
                    return response
            return await call_next(request)
        except Exception as e:
            logger.exception("Error: %s", e)
            return internal_error()


def internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})
