from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class SellerEntity:
    username: str
    email: str
    display_name: Optional[str] = None
    phone: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def public_name(self) -> str:
        """Name shown to buyers; the username stands in when no display name was given."""
        return self.display_name or self.username

    @property
    def has_whatsapp(self) -> bool:
        return bool(self.phone)
