from typing import Generic, TypeVar

from pydantic import BaseModel, computed_field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every endpoint."""

    status_code: int = 200
    data: T | None = None
    message: str = "Success"

    @computed_field
    @property
    def success(self) -> bool:
        return self.status_code < 400


class ErrorResponse(BaseModel):
    """Envelope returned when a request fails."""

    status_code: int
    data: None = None
    message: str
    success: bool = False
    error: str


class PageMeta(BaseModel):
    """Pagination metadata shared by paginated feeds."""

    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
