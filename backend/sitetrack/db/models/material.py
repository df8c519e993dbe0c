from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from sitetrack.db.base import Base
from sitetrack.db.models._mixins import TimestampMixin, UUIDPrimaryKeyMixin

class Material(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "materials"

    name: Mapped[str] = mapped_column(String(256))
    category: Mapped[str | None] = mapped_column(String(128), nullable=True)
    unit: Mapped[str | None] = mapped_column(String(32), nullable=True)
    unit_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    stock_quantity: Mapped[float] = mapped_column(Float, default=0.0)
    minimum_stock: Mapped[float] = mapped_column(Float, default=0.0)
    supplier: Mapped[str | None] = mapped_column(String(256), nullable=True)
