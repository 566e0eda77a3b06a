from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roa.infrastructure.db.models.base import Base
from roa.infrastructure.db.models.restaurant import RestaurantModel


class OrderModel(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    restaurant_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("restaurants.id", ondelete="RESTRICT"),
        nullable=False,
    )
    amount_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    # wall-clock time in the store zone
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    restaurant: Mapped[RestaurantModel] = relationship(back_populates="orders")

    __table_args__ = (
        CheckConstraint("amount_cents > 0", name="ck_orders_amount_positive"),
        Index("ix_orders_restaurant_timestamp", "restaurant_id", "timestamp"),
        Index("ix_orders_timestamp", "timestamp"),
    )
