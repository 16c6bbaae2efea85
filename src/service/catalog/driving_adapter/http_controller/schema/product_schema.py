from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.catalog.domain.entity.product_entity import ProductEntity


class ProductCreateRequest(BaseModel):
    name: str = Field(..., max_length=255)
    price: str = Field(..., max_length=32, description='Decimal as text, e.g. "25.90" or "25,90"')
    description: str = Field('', max_length=5000)
    service_notes: Optional[str] = Field(None, max_length=5000)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Bolo de cenoura',
                'price': '35.00',
                'description': 'Com cobertura de chocolate',
                'service_notes': 'Entrega no bairro',
            }
        }
    )


class ProductUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    price: Optional[str] = Field(None, max_length=32)
    description: Optional[str] = Field(None, max_length=5000)
    service_notes: Optional[str] = Field(None, max_length=5000)


class ProductResponse(BaseModel):
    id: int
    seller_id: int
    name: str
    description: str
    price: str
    service_notes: Optional[str]
    image_data: Optional[str]
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, product: ProductEntity) -> 'ProductResponse':
        return cls(
            id=product.id or 0,
            seller_id=product.seller_id,
            name=product.name,
            description=product.description,
            price=product.price,
            service_notes=product.service_notes,
            image_data=product.image_data,
            created_at=product.created_at,
        )


class MyProductsResponse(BaseModel):
    products: List[ProductResponse]
    product_count: int
    image_count: int
    total_value: str  # two decimals, e.g. "60.40"
