# models/device_detail.py

from typing import List, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from .band import Band
from .combo import Combo
from .device import SoftwareVersion
from .feature import Feature


class DeviceDetail(BaseModel):
    """Everything a device supports, globally or for one provider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    vendor: str
    modelNum: str
    marketName: Optional[str] = None
    releaseDate: Optional[str] = None
    software: List[SoftwareVersion] = []
    # The provider-scoped query returns these under *ForProvider aliases.
    supportedBands: List[Band] = Field(
        default_factory=list,
        validation_alias=AliasChoices("supportedBands", "supportedBandsForProvider"),
    )
    supportedCombos: List[Combo] = Field(
        default_factory=list,
        validation_alias=AliasChoices("supportedCombos", "supportedCombosForProvider"),
    )
    features: List[Feature] = []
