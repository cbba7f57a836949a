from __future__ import annotations

from abc import ABC, abstractmethod

from cta_market.domain.buyer import Buyer


class BuyerRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[Buyer]: ...

    @abstractmethod
    def get_by_id(self, buyer_id: str) -> Buyer | None: ...

    @abstractmethod
    def get_by_email(self, email: str) -> Buyer | None: ...

    @abstractmethod
    def add(self, buyer: Buyer) -> Buyer: ...

    @abstractmethod
    def update(self, buyer: Buyer) -> Buyer: ...

    @abstractmethod
    def count(self) -> int: ...
