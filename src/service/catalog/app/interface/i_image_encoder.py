from abc import ABC, abstractmethod


class IImageEncoder(ABC):
    """Turns an uploaded image into text that can be stored in a product field."""

    @abstractmethod
    def encode(self, *, content: bytes, content_type: str) -> str:
        """Return a self-describing payload such as `data:image/png;base64,...`."""
