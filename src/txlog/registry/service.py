from __future__ import annotations

from typing import Optional

from ..common.validators import optional_text, require_non_empty
from .repository import RegistryRepository


class RegistryService:
    """Use case: create reference entities outside of a workflow intake."""

    def __init__(self, registry: RegistryRepository):
        self._registry = registry

    def upsert_office(self, office_name: str) -> int:
        return self._registry.upsert_office(require_non_empty(office_name, "office_name"))

    def create_person(self, full_name: str, role: Optional[str] = None) -> int:
        return self._registry.create_person(require_non_empty(full_name, "full_name"), optional_text(role))

    def create_product(
        self,
        product_name: str,
        serial_number: Optional[str] = None,
        model_number: Optional[str] = None,
    ) -> int:
        return self._registry.create_product(
            require_non_empty(product_name, "product_name"),
            optional_text(serial_number),
            optional_text(model_number),
        )

    def list_offices(self) -> list[dict]:
        return [{"id": o.id, "office_name": o.office_name} for o in self._registry.list_offices()]
