"""Drawing primitives understood by the AWTRIX custom app API."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class BarGeometry(BaseModel):
    """Pixel geometry of one chart bar."""

    x: int
    y: int
    width: int = 1
    height: int
    color: str


class TextCommand(BaseModel):
    """Draw ``text`` with its top-left corner at (x, y)."""

    command: Literal["dt"] = "dt"
    x: int
    y: int
    text: str
    color: str

    def to_payload(self) -> dict[str, list[Any]]:
        return {self.command: [self.x, self.y, self.text, self.color]}


class FillCommand(BaseModel):
    """Fill a rectangle."""

    command: Literal["df"] = "df"
    x: int
    y: int
    width: int
    height: int
    color: str

    @classmethod
    def from_bar(cls, bar: BarGeometry) -> "FillCommand":
        return cls(x=bar.x, y=bar.y, width=bar.width, height=bar.height, color=bar.color)

    def to_payload(self) -> dict[str, list[Any]]:
        return {self.command: [self.x, self.y, self.width, self.height, self.color]}


DrawCommand = TextCommand | FillCommand


class CustomApp(BaseModel):
    """Ordered draw commands making up one frame of a custom app."""

    draw: list[DrawCommand] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body posted to ``/api/custom``."""
        return {"draw": [command.to_payload() for command in self.draw]}
