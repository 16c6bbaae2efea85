from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class SellerModel(Base):
    __tablename__ = 'seller'

    # Same id as the account row; the profile is written right after the account
    id: Mapped[int] = mapped_column(
        Integer, ForeignKey('account.id'), primary_key=True, autoincrement=False
    )
    # Indexed, not unique: uniqueness is only checked before registration
    username: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    def __repr__(self):
        return f'<SellerModel(id={self.id}, username={self.username})>'
