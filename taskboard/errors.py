"""API error taxonomy.

Each error is an HTTPException so FastAPI renders it as {"detail": ...} with
the matching status code.
"""
import math

from fastapi import HTTPException, status


class Unauthenticated(HTTPException):
    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class RateLimited(HTTPException):
    def __init__(self, retry_after: float):
        self.retry_after = retry_after
        # whole seconds, after dropping sub-millisecond float error
        seconds = max(1, math.ceil(round(retry_after, 3)))
        super().__init__(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Rate limit exceeded. Retry after {round(retry_after * 1000)}ms",
            headers={"Retry-After": str(seconds)},
        )


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class Forbidden(HTTPException):
    def __init__(self, detail: str = "Not authorized"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class InvalidArgument(HTTPException):
    def __init__(self, detail: str):
        # same status FastAPI uses for request-body validation failures
        super().__init__(status_code=422, detail=detail)
