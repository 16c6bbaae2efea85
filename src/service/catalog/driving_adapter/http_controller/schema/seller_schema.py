"""
Seller API Schemas - Pydantic models for request/response
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from src.service.catalog.domain.entity.seller_entity import SellerEntity


class RegisterSellerRequest(BaseModel):
    """Seller registration request; field rules are checked by the registration flow."""

    username: str = Field(..., max_length=100)
    email: str = Field(..., max_length=255)
    password: SecretStr = Field(..., max_length=72, description='bcrypt limit: 72 bytes')
    phone: Optional[str] = Field(None, max_length=30)
    display_name: Optional[str] = Field(None, max_length=100)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'username': 'loja_da_ana',
                'email': 'ana@example.com',
                'password': 'segredo123',
                'phone': '(11) 99999-8888',
                'display_name': 'Loja da Ana',
            }
        }
    )


class LoginRequest(BaseModel):
    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=72)

    model_config = ConfigDict(
        json_schema_extra={'example': {'email': 'ana@example.com', 'password': 'segredo123'}}
    )


class SellerResponse(BaseModel):
    id: int
    username: str
    email: str
    display_name: Optional[str]
    phone: Optional[str]
    catalog_url: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, seller: SellerEntity, *, catalog_url: str) -> 'SellerResponse':
        return cls(
            id=seller.id or 0,
            username=seller.username,
            email=seller.email,
            display_name=seller.display_name,
            phone=seller.phone,
            catalog_url=catalog_url,
            created_at=seller.created_at,
        )


class IdentifierAvailabilityResponse(BaseModel):
    identifier: str
    available: bool
    reason: Optional[str] = None
