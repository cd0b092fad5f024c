from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from landra.config import UPLOAD_DIR


class PropertyImageResponse(BaseModel):
    id: int
    property_id: int
    filename: str
    size: int
    image_path: str = Field(..., exclude=True)
    created_at: Optional[datetime] = None

    @computed_field
    @property
    def url(self) -> str:
        return f"/{UPLOAD_DIR}/{self.image_path}"

    model_config = ConfigDict(from_attributes=True)
