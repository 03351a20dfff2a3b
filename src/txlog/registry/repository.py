from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Office


class RegistryRepository(Protocol):
    def upsert_office(self, office_name: str) -> int:
        raise NotImplementedError

    def create_person(self, full_name: str, role: Optional[str] = None) -> int:
        raise NotImplementedError

    def create_product(
        self,
        product_name: str,
        serial_number: Optional[str] = None,
        model_number: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def list_offices(self) -> Sequence[Office]:
        raise NotImplementedError
