import datetime as dt

from sqlalchemy import Date, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from sitetrack.db.base import Base
from sitetrack.db.models._mixins import TimestampMixin, UUIDPrimaryKeyMixin

class Equipment(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "equipment"

    name: Mapped[str] = mapped_column(String(256))
    type: Mapped[str | None] = mapped_column(String(128), nullable=True)
    model: Mapped[str | None] = mapped_column(String(128), nullable=True)
    status: Mapped[str] = mapped_column(String(32), default="AVAILABLE")
    daily_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    last_maintenance: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    next_maintenance: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
