# models/band.py

from typing import Optional
from pydantic import BaseModel, ConfigDict

TECHNOLOGIES = ("GSM", "HSPA", "LTE", "NR")


class Band(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    bandNumber: Optional[str] = None
    technology: Optional[str] = None
    dlBandClass: Optional[str] = None
    ulBandClass: Optional[str] = None


class NormalizedBand(BaseModel):
    """One row per (bandNumber, technology); class fields are "-" or an "A/C" style union."""

    model_config = ConfigDict(frozen=True)

    id: str
    bandNumber: str
    technology: str
    dlBandClass: str
    ulBandClass: str
