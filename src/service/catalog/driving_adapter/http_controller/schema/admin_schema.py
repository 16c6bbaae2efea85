from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.service.catalog.domain.admin_stats_domain import AdminOverview
from src.service.catalog.domain.whatsapp_link_domain import build_catalog_url


class AdminSellerResponse(BaseModel):
    id: int
    username: str
    email: str
    phone: Optional[str]
    created_at: Optional[datetime]
    product_count: int
    catalog_url: str


class AdminStatsResponse(BaseModel):
    total_sellers: int
    total_products: int
    sellers_with_products: int
    sellers_with_whatsapp: int
    sellers_with_products_percent: int
    sellers_with_whatsapp_percent: int
    average_products_per_seller: int


class AdminOverviewResponse(BaseModel):
    stats: AdminStatsResponse
    sellers: List[AdminSellerResponse]

    @classmethod
    def from_overview(cls, overview: AdminOverview, *, base_url: str) -> 'AdminOverviewResponse':
        stats = overview.stats
        return cls(
            stats=AdminStatsResponse(
                total_sellers=stats.total_sellers,
                total_products=stats.total_products,
                sellers_with_products=stats.sellers_with_products,
                sellers_with_whatsapp=stats.sellers_with_whatsapp,
                sellers_with_products_percent=stats.sellers_with_products_percent,
                sellers_with_whatsapp_percent=stats.sellers_with_whatsapp_percent,
                average_products_per_seller=stats.average_products_per_seller,
            ),
            sellers=[
                AdminSellerResponse(
                    id=item.seller.id or 0,
                    username=item.seller.username,
                    email=item.seller.email,
                    phone=item.seller.phone,
                    created_at=item.seller.created_at,
                    product_count=item.product_count,
                    catalog_url=build_catalog_url(base_url, item.seller.username),
                )
                for item in overview.sellers
            ],
        )
