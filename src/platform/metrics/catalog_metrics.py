from prometheus_client import Counter, Histogram


class CatalogMetrics:
    """
    Catalog Service Core Metrics Collector

    Tracks public catalog traffic, WhatsApp link generation, seller
    registrations and product mutations.
    """

    def __init__(self) -> None:
        # ========== Public Catalog Metrics ==========
        self.catalog_resolutions = Counter(
            'catalog_resolutions_total',
            'Public catalog lookups by identifier',
            ['result'],  # result: found/not_found
        )

        self.catalog_products_returned = Histogram(
            'catalog_products_returned',
            'Number of products in a resolved catalog',
            buckets=[0, 1, 5, 10, 25, 50, 100, 250],
        )

        self.whatsapp_links_generated = Counter(
            'whatsapp_links_generated_total',
            'WhatsApp deep links built',
            ['kind', 'with_phone'],  # kind: interest/inquiry
        )

        # ========== Seller / Product Metrics ==========
        self.seller_registrations = Counter(
            'seller_registrations_total',
            'Seller registration attempts',
            ['result'],  # result: success/validation_error/conflict/failed
        )

        self.product_mutations = Counter(
            'product_mutations_total',
            'Product create/update/delete/image operations',
            ['action'],
        )

    def record_catalog_resolution(self, *, found: bool, product_count: int = 0) -> None:
        self.catalog_resolutions.labels(result='found' if found else 'not_found').inc()
        if found:
            self.catalog_products_returned.observe(product_count)

    def record_whatsapp_link(self, *, kind: str, with_phone: bool) -> None:
        self.whatsapp_links_generated.labels(
            kind=kind, with_phone=str(with_phone).lower()
        ).inc()

    def record_registration(self, *, result: str) -> None:
        self.seller_registrations.labels(result=result).inc()

    def record_product_mutation(self, *, action: str) -> None:
        self.product_mutations.labels(action=action).inc()


# Global metrics instance
catalog_metrics = CatalogMetrics()
