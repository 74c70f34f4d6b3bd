"""CondenseResponse Pydantic model."""

from pydantic import BaseModel


class CondenseResponse(BaseModel):
    """Response body for the POST /condense endpoint.

    ``frontmatter`` holds only the fields captured from ``<head>``;
    ``reduction_pct`` is the size saving relative to the input.
    """

    content: str
    frontmatter: dict[str, str] = {}
    input_chars: int
    output_chars: int
    reduction_pct: float
