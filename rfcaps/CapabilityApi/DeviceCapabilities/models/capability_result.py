# models/capability_result.py

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from .device import Device, SoftwareVersion
from .provider import Provider


class SupportStatus(str, Enum):
    GLOBAL = "GLOBAL"
    PROVIDER_SPECIFIC = "PROVIDER_SPECIFIC"


class CapabilityResult(BaseModel):
    """A device row from a capability lookup, tagged by how it was queried."""

    model_config = ConfigDict(frozen=True)

    device: Device
    software: List[SoftwareVersion] = []
    provider: Optional[Provider] = None
    supportStatus: SupportStatus
