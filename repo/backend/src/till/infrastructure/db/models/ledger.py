from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from till.domain.common.currency import Currency
from till.domain.common.non_negative import NonNegativeCurrency
from till.infrastructure.db.types import CurrencyType, NonNegativeCurrencyType


class Base(DeclarativeBase):
    pass


class InventoryItemModel(Base):
    __tablename__ = "inventory_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    price: Mapped[NonNegativeCurrency | None] = mapped_column(
        NonNegativeCurrencyType(),
        nullable=True,
    )


class TransactionModel(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    amount: Mapped[Currency] = mapped_column(CurrencyType(), nullable=False)
    time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
