# models/combo.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from .band import Band


class Combo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    technology: Optional[str] = None
    bands: List[Band] = []
