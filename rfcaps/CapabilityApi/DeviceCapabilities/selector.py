# DeviceCapabilities/selector.py

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union
from pydantic import BaseModel, ConfigDict
from . import queries
from .errors import UnsupportedCapabilityKind
from .models import CapabilityResult, SupportStatus

logger = logging.getLogger(__name__)


class CapabilityKind(str, Enum):
    BAND = "band"
    COMBO = "combo"
    FEATURE = "feature"


class CapabilityQuerySpec(NamedTuple):
    global_operation: str
    global_query: str
    scoped_operation: str
    scoped_query: str
    id_variable: str
    result_field: str


CAPABILITY_QUERIES: Dict[CapabilityKind, CapabilityQuerySpec] = {
    CapabilityKind.BAND: CapabilityQuerySpec(
        "DevicesByBand", queries.DEVICES_BY_BAND,
        "DevicesByBandProvider", queries.DEVICES_BY_BAND_PROVIDER,
        "bandId", "devicesByBand",
    ),
    CapabilityKind.COMBO: CapabilityQuerySpec(
        "DevicesByCombo", queries.DEVICES_BY_COMBO,
        "DevicesByComboProvider", queries.DEVICES_BY_COMBO_PROVIDER,
        "comboId", "devicesByCombo",
    ),
    CapabilityKind.FEATURE: CapabilityQuerySpec(
        "DevicesByFeature", queries.DEVICES_BY_FEATURE,
        "DevicesByFeatureProvider", queries.DEVICES_BY_FEATURE_PROVIDER,
        "featureId", "devicesByFeature",
    ),
}


class QueryDescriptor(BaseModel):
    """A ready-to-send capability query and where its rows live in the payload."""

    model_config = ConfigDict(frozen=True)

    kind: CapabilityKind
    operationName: str
    query: str
    variables: Dict[str, Any]
    resultField: str
    providerId: Optional[str] = None

    @property
    def scoped(self) -> bool:
        return bool(self.providerId)

    @property
    def supportStatus(self) -> SupportStatus:
        return SupportStatus.PROVIDER_SPECIFIC if self.scoped else SupportStatus.GLOBAL


def resolve_kind(kind: Union[CapabilityKind, str]) -> CapabilityKind:
    if isinstance(kind, CapabilityKind):
        return kind
    if isinstance(kind, str):
        try:
            return CapabilityKind(kind.lower())
        except ValueError:
            pass
    raise UnsupportedCapabilityKind(kind)


def select_capability_query(
    kind: Union[CapabilityKind, str],
    capability_id: str,
    provider_id: Optional[str] = None,
    technology: Optional[str] = None,
) -> QueryDescriptor:
    """
    Picks the global or provider-scoped query for a capability kind.

    The variant depends only on whether provider_id is set; None and "" both
    select the global query. providerId and technology go into the variables
    only when set.

    Raises:
        UnsupportedCapabilityKind: kind is not band, combo or feature.
    """
    resolved = resolve_kind(kind)
    variant = CAPABILITY_QUERIES[resolved]

    variables: Dict[str, Any] = {variant.id_variable: capability_id}
    if provider_id:
        variables["providerId"] = provider_id
    if technology is not None:
        variables["technology"] = technology

    if provider_id:
        operation, query = variant.scoped_operation, variant.scoped_query
    else:
        operation, query = variant.global_operation, variant.global_query

    return QueryDescriptor(
        kind=resolved,
        operationName=operation,
        query=query,
        variables=variables,
        resultField=variant.result_field,
        providerId=provider_id or None,
    )


def tag_support_status(
    rows: Optional[Iterable[Dict[str, Any]]], provider_id: Optional[str]
) -> List[CapabilityResult]:
    """Builds CapabilityResults whose status comes from the query, never from the row."""
    status = SupportStatus.PROVIDER_SPECIFIC if provider_id else SupportStatus.GLOBAL
    results = []
    for row in rows or []:
        backend_status = row.get("supportStatus")
        if backend_status is not None and backend_status != status.value:
            logger.debug(
                f"Backend status {backend_status} differs from {status.value} "
                f"for device {(row.get('device') or {}).get('id')}; keeping {status.value}"
            )
        results.append(CapabilityResult(**{**row, "supportStatus": status}))
    return results
