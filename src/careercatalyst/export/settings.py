"""Fixed page settings for exported CVs."""

from __future__ import annotations

from dataclasses import dataclass

CSS_PX_PER_INCH = 96
MM_PER_INCH = 25.4

AVAILABLE_THEMES = ("professional", "modern", "minimal")


@dataclass(frozen=True)
class PageSettings:
    page_format: str = "A4"
    orientation: str = "portrait"
    margin_in: float = 0.5
    image_quality: float = 0.95  # 0.0 - 1.0
    scale: int = 3

    @property
    def margin_mm(self) -> float:
        return self.margin_in * MM_PER_INCH

    @property
    def jpeg_quality(self) -> int:
        # WeasyPrint takes an integer quality capped at 95
        return min(95, round(self.image_quality * 100))

    @property
    def dpi(self) -> int:
        return CSS_PX_PER_INCH * self.scale

    @property
    def page_css(self) -> str:
        return f"@page {{ size: {self.page_format} {self.orientation}; margin: {self.margin_in}in; }}"


PAGE = PageSettings()
