# DeviceCapabilities/models/__init__.py

from .band import TECHNOLOGIES, Band, NormalizedBand
from .capability_result import CapabilityResult, SupportStatus
from .combo import Combo
from .device import Device, SoftwareVersion
from .device_detail import DeviceDetail
from .feature import Feature
from .provider import Provider
from .response import GraphQLError, Response

__all__ = [
    "TECHNOLOGIES",
    "Band",
    "CapabilityResult",
    "Combo",
    "Device",
    "DeviceDetail",
    "Feature",
    "GraphQLError",
    "NormalizedBand",
    "Provider",
    "Response",
    "SoftwareVersion",
    "SupportStatus",
]
