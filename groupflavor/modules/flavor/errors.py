"""Errors raised by flavor plugins."""
from typing import Any, Dict, List, Optional

from ..api.models import InstanceSpec


class ConfigDecodeError(ValueError):
    """
    Flavor properties do not match the expected schema.

    Attributes:
        errors: Field-level problems reported by the decoder
        spec: The caller's unchanged instance spec, set when raised by prepare()
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        spec: Optional[InstanceSpec] = None,
    ):
        super().__init__(message)
        self.errors = errors or []
        self.spec = spec
