from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.catalog.domain.entity.product_entity import ProductEntity


class IProductQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[ProductEntity]:
        pass

    @abstractmethod
    async def list_by_seller(self, seller_id: int) -> List[ProductEntity]:
        """Products of one seller in store order."""
        pass

    @abstractmethod
    async def list_all(self) -> List[ProductEntity]:
        pass
