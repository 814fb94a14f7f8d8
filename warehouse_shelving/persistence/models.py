"""SQLAlchemy ORM models for warehouses and their shelves."""

from __future__ import annotations

from sqlalchemy import Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from warehouse_shelving.enterprise.core import ShelfType, WarehouseFamily

from .database import Base


class WarehouseRecord(Base):
    __tablename__ = "warehouses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client: Mapped[str] = mapped_column(String(255), nullable=False)
    installation: Mapped[str] = mapped_column(String(255), nullable=False)
    family: Mapped[WarehouseFamily] = mapped_column(Enum(WarehouseFamily), nullable=False)
    max_shelves: Mapped[int] = mapped_column(Integer, nullable=False)

    # Shelves live and die with their warehouse.
    shelves: Mapped[list["ShelfRecord"]] = relationship(
        back_populates="warehouse",
        cascade="all, delete-orphan",
        order_by="ShelfRecord.id",
        lazy="selectin",
    )


class ShelfRecord(Base):
    __tablename__ = "shelves"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[ShelfType] = mapped_column(Enum(ShelfType), nullable=False)
    warehouse_id: Mapped[int] = mapped_column(
        ForeignKey("warehouses.id", ondelete="CASCADE"), nullable=False, index=True
    )

    warehouse: Mapped[WarehouseRecord] = relationship(back_populates="shelves")
