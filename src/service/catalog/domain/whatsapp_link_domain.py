"""
WhatsApp deep links and the texts that go with them.

A buyer taps a product and lands in a WhatsApp chat with the seller, with a
pre-filled message describing the product. The messages are in Portuguese
because the catalogs are public pages for Brazilian sellers.
"""

import re
from typing import Optional
from urllib.parse import quote

import attrs


WHATSAPP_BASE_URL = 'https://wa.me/'
DEFAULT_COUNTRY_CODE = '55'

# Characters left alone by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

_NON_DIGITS = re.compile(r'\D')

PRODUCT_INTEREST_TEMPLATE = (
    '🛍️ *Interesse em produto*\n'
    '\n'
    '📦 *Produto:* {product_name}\n'
    '💰 *Preço:* R$ {price}\n'
    '📋 *Descrição:* {description}\n'
    '\n'
    '👋 Olá {seller_display_name}! Vi este produto no seu catálogo e tenho interesse. '
    'Podemos conversar?\n'
    '\n'
    '🔗 Catálogo: {catalog_url}'
)

PRODUCT_INQUIRY_TEMPLATE = 'Olá {seller_display_name}, tenho interesse no produto "{product_name}".'


def normalize_phone(raw: Optional[str]) -> str:
    """Keep only the digits of a phone number as typed by the seller."""
    if not raw:
        return ''
    return _NON_DIGITS.sub('', raw)


def encode_uri_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def build_catalog_url(base_url: str, identifier: str) -> str:
    return f'{base_url.rstrip("/")}/{identifier}'


def render_product_interest_message(
    *,
    product_name: str,
    price: str,
    description: str,
    seller_display_name: str,
    catalog_url: str,
) -> str:
    return PRODUCT_INTEREST_TEMPLATE.format(
        product_name=product_name,
        price=price,
        description=description,
        seller_display_name=seller_display_name,
        catalog_url=catalog_url,
    )


def render_product_inquiry_message(*, product_name: str, seller_display_name: str) -> str:
    """Short message used from the product detail page."""
    return PRODUCT_INQUIRY_TEMPLATE.format(
        product_name=product_name, seller_display_name=seller_display_name
    )


def render_product_share_text(*, product_name: str, price: str, description: str) -> str:
    return f'{product_name} - R$ {price}\n{description}'


@attrs.frozen
class CatalogShare:
    title: str
    text: str
    url: str


def build_catalog_share(*, seller_display_name: str, catalog_url: str) -> CatalogShare:
    return CatalogShare(
        title=f'Catálogo de {seller_display_name}',
        text=f'Confira os produtos incríveis de {seller_display_name}!',
        url=catalog_url,
    )


def build_whatsapp_link(
    message: str, phone: Optional[str] = None, country_code: str = DEFAULT_COUNTRY_CODE
) -> str:
    """
    Build a wa.me deep link carrying `message` as pre-filled text.

    With a phone the chat opens directly with that number (country code
    prefixed); without one WhatsApp asks the user to pick a contact.

    >>> build_whatsapp_link('Oi', phone='11999998888')
    'https://wa.me/5511999998888?text=Oi'
    """
    digits = normalize_phone(phone)
    encoded = encode_uri_component(message)
    if digits:
        return f'{WHATSAPP_BASE_URL}{country_code}{digits}?text={encoded}'
    return f'{WHATSAPP_BASE_URL}?text={encoded}'
