"""Public re-exports of all model types."""

from models.options import CondenseOptions
from models.request import CondenseRequest
from models.response import CondenseResponse

__all__ = [
    "CondenseOptions",
    "CondenseRequest",
    "CondenseResponse",
]
