# DeviceCapabilities/normalizer.py

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Set
from .models import NormalizedBand

NO_BAND_CLASS = "-"


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _missing(value: Any) -> bool:
    return value is None or str(value) == ""


def _add_classes(classes: Set[str], value: Any) -> None:
    if _missing(value):
        return
    for part in str(value).split("/"):
        part = part.strip()
        if part and part != NO_BAND_CLASS:
            classes.add(part)


def _join_classes(classes: Set[str]) -> str:
    return "/".join(sorted(classes)) or NO_BAND_CLASS


def group_bands(raw_bands: Optional[Iterable[Any]]) -> List[NormalizedBand]:
    """
    Collapses band records that differ only in band class into one row per
    (bandNumber, technology).

    Records missing bandNumber or technology are dropped. dl/ul classes are
    merged as a sorted, de-duplicated "/" list, or "-" when none were seen.
    Already-joined values such as "A/C" are split first, so grouped and raw
    rows can be mixed. The id comes from the first record of each group,
    falling back to "<bandNumber>-<technology>". Groups keep first-seen order.

    Args:
        raw_bands: Band models, NormalizedBand models or plain dicts.

    Returns:
        List[NormalizedBand]: One record per group.
    """
    groups: Dict[tuple, Dict[str, Any]] = {}

    for band in raw_bands or []:
        band_number = _field(band, "bandNumber")
        technology = _field(band, "technology")
        if _missing(band_number) or _missing(technology):
            continue

        key = (str(band_number), str(technology))
        group = groups.get(key)
        if group is None:
            band_id = _field(band, "id")
            group = groups[key] = {
                "id": str(band_id) if band_id is not None else f"{key[0]}-{key[1]}",
                "dl": set(),
                "ul": set(),
            }

        _add_classes(group["dl"], _field(band, "dlBandClass"))
        _add_classes(group["ul"], _field(band, "ulBandClass"))

    return [
        NormalizedBand(
            id=group["id"],
            bandNumber=band_number,
            technology=technology,
            dlBandClass=_join_classes(group["dl"]),
            ulBandClass=_join_classes(group["ul"]),
        )
        for (band_number, technology), group in groups.items()
    ]
