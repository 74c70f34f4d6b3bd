"""CondenseRequest Pydantic model with strict validation (extra=forbid)."""

from pydantic import BaseModel, ConfigDict, Field

from models.options import CondenseOptions


class CondenseRequest(BaseModel):
    """Incoming request body for the POST /condense endpoint.

    Extra fields are rejected with a 422 response.
    """

    model_config = ConfigDict(extra="forbid")

    html: str
    options: CondenseOptions = Field(default_factory=CondenseOptions)
