"""Column geometry derived from the terminal size."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


class LayoutConfig(BaseModel):
    """Layout settings passed to the board when the terminal is resized."""

    divisor: int = Field(default=3, ge=1, description="Terminal width is split into this many parts")
    min_width: int = Field(default=60, ge=1, description="Below this width a warning is shown")
    min_height: int = Field(default=12, ge=1, description="Below this height a warning is shown")
    card_text_width: int = Field(default=24, ge=4, description="Card title/description truncation")

    def geometry_for(self, width: int, height: int) -> ColumnGeometry:
        return ColumnGeometry(
            width=max(width // self.divisor, 0),
            height=max(height - self.divisor, 0),
        )

    def is_too_small(self, width: int, height: int) -> bool:
        return width < self.min_width or height < self.min_height


@dataclass(frozen=True, slots=True)
class ColumnGeometry:
    width: int
    height: int
