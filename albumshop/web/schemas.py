from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, StrictFloat, StrictInt

# Everything optional: presence and range checks belong to the store so a
# missing field is a 400 with our error body, not a 422.


class AlbumCreate(BaseModel):
    title: Optional[str] = None
    artist: Optional[str] = None
    price: Optional[Union[StrictFloat, StrictInt, str]] = None
    image_url: Optional[str] = None


class AlbumUpdate(BaseModel):
    title: Optional[str] = None
    artist: Optional[str] = None
    price: Optional[Union[StrictFloat, StrictInt, str]] = None
    image_url: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class AlbumOut(BaseModel):
    id: int
    title: str
    artist: str
    price: float
    image_url: str


class ErrorOut(BaseModel):
    error: str
