from enum import Enum as PyEnum
from sqlalchemy import String, Integer, Numeric, ForeignKey, Enum, Boolean, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import TYPE_CHECKING
from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.unit import Unit


class Currency(str, PyEnum):
    """Currencies rent and payments are denominated in"""

    UGX = "UGX"
    USD = "USD"


class PropertyStatus(str, PyEnum):
    """Listing moderation status"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PropertyType(str, PyEnum):
    HOUSE = "house"
    APARTMENT = "apartment"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    STUDIO = "studio"
    LAND = "land"


class ListingType(str, PyEnum):
    SALE = "sale"
    RENT = "rent"


def _values(enum_cls):
    return [e.value for e in enum_cls]


class Property(Base, TimestampMixin):
    """
    Property listing owned by a landlord.

    New listings start as PENDING until an admin approves or rejects them.
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    landlord_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("landlords.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    property_type: Mapped[PropertyType] = mapped_column(
        Enum(PropertyType, native_enum=False, values_callable=_values),
        nullable=False,
        default=PropertyType.HOUSE,
    )
    listing_type: Mapped[ListingType] = mapped_column(
        Enum(ListingType, native_enum=False, values_callable=_values),
        nullable=False,
        default=ListingType.RENT,
    )
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    bedrooms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    bathrooms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    square_feet: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rent_amount: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    sale_price: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    deposit_amount: Mapped[float | None] = mapped_column(Numeric(precision=15, scale=2), nullable=True)
    currency: Mapped[Currency] = mapped_column(
        Enum(Currency, native_enum=False, values_callable=_values),
        nullable=False,
        default=Currency.UGX,
    )
    parking: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    furnished: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[PropertyStatus] = mapped_column(
        Enum(PropertyStatus, native_enum=False, values_callable=_values),
        nullable=False,
        default=PropertyStatus.PENDING,
        index=True,
    )
    amenities: Mapped[list[str] | None] = mapped_column(JSON, nullable=True, default=list)
    images: Mapped[list[str] | None] = mapped_column(JSON, nullable=True, default=list)

    # Relationships
    units: Mapped[list["Unit"]] = relationship(
        "Unit",
        back_populates="property",
        cascade="all, delete-orphan",
    )
