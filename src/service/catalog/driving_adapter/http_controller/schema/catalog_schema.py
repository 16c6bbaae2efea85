from typing import List, Optional

from pydantic import BaseModel

from src.service.catalog.app.dto.catalog_view import CatalogView
from src.service.catalog.app.query.get_catalog_product_use_case import CatalogProduct
from src.service.catalog.domain.entity.product_entity import ProductEntity
from src.service.catalog.domain.entity.seller_entity import SellerEntity
from src.service.catalog.domain.whatsapp_link_domain import (
    build_catalog_share,
    build_catalog_url,
    build_whatsapp_link,
    render_product_inquiry_message,
    render_product_interest_message,
    render_product_share_text,
)


class PublicSellerResponse(BaseModel):
    username: str
    display_name: str
    has_whatsapp: bool

    @classmethod
    def from_entity(cls, seller: SellerEntity) -> 'PublicSellerResponse':
        return cls(
            username=seller.username,
            display_name=seller.public_name,
            has_whatsapp=seller.has_whatsapp,
        )


class ShareResponse(BaseModel):
    title: str
    text: str
    url: str


class CatalogProductResponse(BaseModel):
    id: int
    name: str
    description: str
    price: str
    service_notes: Optional[str]
    image_data: Optional[str]
    whatsapp_link: str
    share_text: str


class CatalogResponse(BaseModel):
    seller: PublicSellerResponse
    catalog_url: str
    product_count: int
    share: ShareResponse
    products: List[CatalogProductResponse]


class CatalogProductDetailResponse(BaseModel):
    seller: PublicSellerResponse
    catalog_url: str
    product: CatalogProductResponse


def _product_response(product: ProductEntity, *, whatsapp_link: str) -> CatalogProductResponse:
    return CatalogProductResponse(
        id=product.id or 0,
        name=product.name,
        description=product.description,
        price=product.price,
        service_notes=product.service_notes,
        image_data=product.image_data,
        whatsapp_link=whatsapp_link,
        share_text=render_product_share_text(
            product_name=product.name, price=product.price, description=product.description
        ),
    )


def build_catalog_response(
    view: CatalogView, *, base_url: str, country_code: str
) -> CatalogResponse:
    seller = view.seller
    catalog_url = build_catalog_url(base_url, seller.username)
    share = build_catalog_share(seller_display_name=seller.public_name, catalog_url=catalog_url)

    products = []
    for product in view.products:
        message = render_product_interest_message(
            product_name=product.name,
            price=product.price,
            description=product.description,
            seller_display_name=seller.public_name,
            catalog_url=catalog_url,
        )
        products.append(
            _product_response(
                product,
                whatsapp_link=build_whatsapp_link(
                    message, phone=seller.phone, country_code=country_code
                ),
            )
        )

    return CatalogResponse(
        seller=PublicSellerResponse.from_entity(seller),
        catalog_url=catalog_url,
        product_count=view.product_count,
        share=ShareResponse(title=share.title, text=share.text, url=share.url),
        products=products,
    )


def build_catalog_product_response(
    catalog_product: CatalogProduct, *, base_url: str, country_code: str
) -> CatalogProductDetailResponse:
    seller, product = catalog_product.seller, catalog_product.product
    message = render_product_inquiry_message(
        product_name=product.name, seller_display_name=seller.public_name
    )
    return CatalogProductDetailResponse(
        seller=PublicSellerResponse.from_entity(seller),
        catalog_url=build_catalog_url(base_url, seller.username),
        product=_product_response(
            product,
            whatsapp_link=build_whatsapp_link(
                message, phone=seller.phone, country_code=country_code
            ),
        ),
    )
