# campus_energy/core/errors.py

from typing import Any, Dict, List, Optional


class EnergyError(Exception):
    """Base class for errors raised by the energy core."""


class ValidationError(EnergyError):
    """
    A reading (or other input) was rejected and nothing was stored.

    `errors` holds one dict per offending field: {"loc", "msg", "type"}.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class NotFoundError(EnergyError):
    """An operation referenced an identifier that does not exist."""

    def __init__(self, kind: str, item_id: str):
        super().__init__(f"{kind} not found: {item_id}")
        self.kind = kind
        self.item_id = item_id
