from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.catalog.domain.entity.seller_entity import SellerEntity


class ISellerQueryRepo(ABC):
    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        pass

    @abstractmethod
    async def list_by_username(self, username: str) -> List[SellerEntity]:
        """All sellers with this username; more than one only after a registration race."""
        pass

    @abstractmethod
    async def get_by_id(self, seller_id: int) -> Optional[SellerEntity]:
        pass

    @abstractmethod
    async def list_all_newest_first(self) -> List[SellerEntity]:
        pass
