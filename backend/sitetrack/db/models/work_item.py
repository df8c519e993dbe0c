import datetime as dt
from enum import Enum

from sqlalchemy import Date, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sitetrack.db.base import Base
from sitetrack.db.models._mixins import TimestampMixin, UUIDPrimaryKeyMixin

class WorkItemStatus(str, Enum):
    not_started = "NOT_STARTED"
    in_progress = "IN_PROGRESS"
    completed = "COMPLETED"

class WorkItem(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "work_items"

    project_id: Mapped[str] = mapped_column(ForeignKey("projects.id"), index=True)
    name: Mapped[str] = mapped_column(String(512))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    unit: Mapped[str] = mapped_column(String(32))  # m3, m2, t, ...

    design_quantity: Mapped[float] = mapped_column(Float)
    completed_quantity: Mapped[float] = mapped_column(Float, default=0.0)
    unit_price: Mapped[float] = mapped_column(Float)

    start_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(32), default=WorkItemStatus.not_started.value)

    project = relationship("Project", back_populates="work_items")
