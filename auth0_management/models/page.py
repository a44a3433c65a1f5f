"""Pagination parameter shared by list endpoints."""

from pydantic import BaseModel, Field


class Page(BaseModel):
    """Page index, page size and total-count request.

    Every field is optional; an unset field is omitted from the query so the
    server applies its own default. Bounds are enforced server-side only.
    """

    page: int | None = Field(None, description="Zero-based page index")
    per_page: int | None = Field(None, description="Number of results per page")
    include_totals: bool | None = Field(
        None, description="Wrap results in an envelope carrying the total count"
    )

    def is_empty(self) -> bool:
        return self.page is None and self.per_page is None and self.include_totals is None

    def to_params(self) -> dict[str, str]:
        """Serialize the fields that were set into query parameters."""
        params: dict[str, str] = {}
        for key, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = str(value)
        return params
