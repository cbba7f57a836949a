from __future__ import annotations

from abc import ABC, abstractmethod

from cta_market.domain.dealership import Dealership


class DealershipRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[Dealership]: ...

    @abstractmethod
    def get_by_id(self, dealership_id: str) -> Dealership | None: ...

    @abstractmethod
    def get_by_tax_id(self, tax_id: str) -> Dealership | None: ...

    @abstractmethod
    def add(self, dealership: Dealership) -> Dealership: ...

    @abstractmethod
    def update(self, dealership: Dealership) -> Dealership:
        """Persist changes of an existing dealership (matched by id)."""
        ...

    @abstractmethod
    def count(self) -> int: ...
