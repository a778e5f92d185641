"""Summary of a completed render."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class RenderSummary(BaseModel):
    """What the renderer wrote, for callers that need to inspect a figure."""

    destination: str
    title: str
    legend_labels: List[str] = Field(default_factory=list)
    curve_point_count: int = 0
    share_points: List[Tuple[float, float]] = Field(default_factory=list)
    secret_point: Optional[Tuple[float, float]] = None
    output_size_bytes: int = 0
