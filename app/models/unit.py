from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Numeric, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.property import Property


class UnitStatus(str, PyEnum):
    VACANT = "vacant"
    OCCUPIED = "occupied"
    UNDER_MAINTENANCE = "under_maintenance"


class Unit(Base, TimestampMixin):
    """Rentable unit inside a property"""

    __tablename__ = "units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    unit_number: Mapped[str] = mapped_column(String(50), nullable=False)
    bedrooms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rent_amount: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    status: Mapped[UnitStatus] = mapped_column(
        Enum(UnitStatus, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=UnitStatus.VACANT,
    )

    # Relationships
    property: Mapped["Property"] = relationship("Property", back_populates="units")
