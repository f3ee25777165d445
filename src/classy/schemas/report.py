"""Report entry model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReportEntry(BaseModel):
    """A signature that survived ranking, with its corpus count.

    Attributes:
        signature: Canonical, space-joined class set.
        count: Number of elements in the corpus carrying this class set.
    """

    model_config = ConfigDict(frozen=True)

    signature: str
    count: int = Field(..., ge=1)

    @property
    def separator_count(self) -> int:
        """Number of single-space separators, i.e. tokens minus one."""
        return self.signature.count(" ")
