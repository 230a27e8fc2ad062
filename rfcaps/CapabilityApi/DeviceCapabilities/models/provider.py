# models/provider.py

from typing import Optional
from pydantic import BaseModel, ConfigDict


class Provider(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    country: Optional[str] = None
    networkType: Optional[str] = None
