from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from storefront_logo.db.base import Base


class Logo(Base):
    __tablename__ = "logos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="text")
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    font_family: Mapped[str] = mapped_column(String(100), nullable=False, default="Arial")
    font_size: Mapped[int] = mapped_column(Integer, nullable=False, default=24)
    color: Mapped[str] = mapped_column(String(20), nullable=False, default="#007AFF")
    font_weight: Mapped[int] = mapped_column(Integer, nullable=False, default=700)
    text_effect: Mapped[str] = mapped_column(String(20), nullable=False, default="none")
    layout: Mapped[str] = mapped_column(String(20), nullable=False, default="left-right")
    spacing: Mapped[int] = mapped_column(Integer, nullable=False, default=8)
    alignment: Mapped[str] = mapped_column(String(20), nullable=False, default="center")
    width: Mapped[int] = mapped_column(Integer, nullable=False, default=150)
    height: Mapped[int] = mapped_column(Integer, nullable=False, default=50)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
