from abc import ABC, abstractmethod

from src.service.catalog.domain.entity.seller_entity import SellerEntity


class ISellerCommandRepo(ABC):
    @abstractmethod
    async def create(self, seller_entity: SellerEntity) -> SellerEntity:
        """Persist a seller profile under the id issued by the account service."""
        pass
