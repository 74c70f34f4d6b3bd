"""Per-call configuration as a frozen Pydantic v2 model."""

from pydantic import BaseModel, ConfigDict


class CondenseOptions(BaseModel):
    """Flags controlling what the condensing pipeline keeps.

    ``keep_ids`` and ``markdown`` default to ``True``; every other flag
    defaults to ``False``.  Instances are immutable and unknown keys are
    rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    keep_data_attributes: bool = False
    keep_ids: bool = True
    keep_classes: bool = False
    keep_aria_hidden: bool = False
    markdown: bool = True
    core: bool = False
