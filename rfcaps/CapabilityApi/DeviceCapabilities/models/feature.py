# models/feature.py

from typing import Optional
from pydantic import BaseModel, ConfigDict


class Feature(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: Optional[str] = None
