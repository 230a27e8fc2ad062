# models/device.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class SoftwareVersion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    platform: Optional[str] = None
    buildNumber: Optional[str] = None
    releaseDate: Optional[str] = None


class Device(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    vendor: str
    modelNum: str
    marketName: Optional[str] = None
    releaseDate: Optional[str] = None
    software: List[SoftwareVersion] = []
