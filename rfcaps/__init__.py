# rfcaps/__init__.py

from .CapabilityApi.DeviceCapabilities.controller import Controller
from .CapabilityApi.DeviceCapabilities.debounce import Debouncer, debounce
from .CapabilityApi.DeviceCapabilities.dedupe import dedupe_by_id
from .CapabilityApi.DeviceCapabilities.errors import ApiError, UnsupportedCapabilityKind
from .CapabilityApi.DeviceCapabilities.normalizer import group_bands
from .CapabilityApi.DeviceCapabilities.policy import should_auto_select
from .CapabilityApi.DeviceCapabilities.selector import (
    CapabilityKind, QueryDescriptor, select_capability_query, tag_support_status,
)

__all__ = [
    "ApiError",
    "CapabilityKind",
    "Controller",
    "Debouncer",
    "QueryDescriptor",
    "UnsupportedCapabilityKind",
    "debounce",
    "dedupe_by_id",
    "group_bands",
    "select_capability_query",
    "should_auto_select",
    "tag_support_status",
]
