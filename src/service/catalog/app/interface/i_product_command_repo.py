from abc import ABC, abstractmethod

from src.service.catalog.domain.entity.product_entity import ProductEntity


class IProductCommandRepo(ABC):
    @abstractmethod
    async def create(self, product_entity: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def update(self, product_entity: ProductEntity) -> ProductEntity:
        pass

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        pass
