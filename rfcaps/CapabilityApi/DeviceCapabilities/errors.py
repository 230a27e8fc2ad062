# DeviceCapabilities/errors.py

from typing import List, Optional
from .models import GraphQLError


class UnsupportedCapabilityKind(ValueError):
    """Raised for a capability kind other than band, combo or feature."""

    def __init__(self, kind):
        super().__init__(f"Unsupported capability kind: {kind!r}")
        self.kind = kind


class ApiError(Exception):
    """The backend answered, but with GraphQL errors instead of data."""

    def __init__(self, errors: List[GraphQLError], operation: Optional[str] = None):
        messages = "; ".join(error.message for error in errors) or "unknown error"
        super().__init__(f"API Error: {messages}")
        self.errors = errors
        self.operation = operation

    @property
    def codes(self) -> List[str]:
        return [
            (error.extensions or {}).get("code")
            for error in self.errors
            if (error.extensions or {}).get("code")
        ]
