from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TextAnnotation(BaseModel):
    """One OCR-detected text region. The first of a result is the whole-image text."""
    description: str


class StoredObject(BaseModel):
    bucket: str
    key: str
    public_url: str


class GameReference(BaseModel):
    game_id: int
    status: Optional[str] = None

    @property
    def is_live(self) -> bool:
        return self.status == "Live"


# Output Models
class OnIcePlayer(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    full_name: str = Field(alias="fullName")
    number: str


class BoxscoreSide(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str
    on_ice: list[OnIcePlayer] = Field(alias="onIce")


class BoxscoreView(BaseModel):
    """Home/away team names with the players currently on ice for each side."""
    model_config = ConfigDict(extra="forbid")

    home: BoxscoreSide
    away: BoxscoreSide

    def to_response(self) -> dict:
        """Serialize with the camelCase keys used on the wire."""
        return self.model_dump(by_alias=True)
