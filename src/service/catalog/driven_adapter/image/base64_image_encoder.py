import base64

from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_image_encoder import IImageEncoder


class Base64ImageEncoder(IImageEncoder):
    """Encode image bytes as a `data:` URL so it can live in a text column."""

    @Logger.io(truncate_content=True)
    def encode(self, *, content: bytes, content_type: str) -> str:
        encoded = base64.b64encode(content).decode('ascii')
        return f'data:{content_type};base64,{encoded}'
