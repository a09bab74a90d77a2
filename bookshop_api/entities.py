"""Database entities for shops and books."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")

_RANKS = ((10000, "ベストセラー"), (1000, "売れ筋"), (100, "そこそこ"), (10, "ちょいちょい"))


class Base(DeclarativeBase):
    """Declarative base for all entities."""


class Shop(Base):
    """A shop."""

    __tablename__ = "shops"

    id: Mapped[int] = mapped_column(_ID_TYPE, primary_key=True, autoincrement=True)
    shop_name: Mapped[str] = mapped_column(String(255), default="")
    shop_description: Mapped[str] = mapped_column(String(255), default="")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)


class Book(Base):
    """A book with its sales figure."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(_ID_TYPE, primary_key=True, autoincrement=True)
    book_name: Mapped[str] = mapped_column(String(255), default="")
    book_description: Mapped[str] = mapped_column(String(255), default="")
    sales: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def rank(self) -> Optional[str]:
        """Sales rank label, or None for ten sales or fewer."""
        sales = self.sales or 0
        return next((label for limit, label in _RANKS if sales > limit), None)