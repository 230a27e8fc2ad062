# DeviceCapabilities/policy.py

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def should_auto_select(results: Optional[Sequence[Any]], current_selection: Optional[str]) -> bool:
    """A lone search match is picked automatically, unless the user already chose something."""
    return results is not None and len(results) == 1 and current_selection is None


def single_technology(technologies: Optional[Sequence[str]]) -> Optional[str]:
    """The backend technology filter only applies when exactly one technology is selected."""
    if technologies and len(technologies) == 1:
        return technologies[0]
    return None


def filter_by_technologies(items: Optional[Iterable[T]], technologies: Optional[Sequence[str]]) -> List[T]:
    if not technologies:
        return list(items or [])

    def technology_of(item):
        if isinstance(item, Mapping):
            return item.get("technology")
        return getattr(item, "technology", None)

    return [item for item in items or [] if technology_of(item) in technologies]
