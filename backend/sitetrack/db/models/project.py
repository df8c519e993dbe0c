import datetime as dt
from enum import Enum

from sqlalchemy import Date, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sitetrack.db.base import Base
from sitetrack.db.models._mixins import TimestampMixin, UUIDPrimaryKeyMixin

class ProjectStatus(str, Enum):
    planning = "PLANNING"
    in_progress = "IN_PROGRESS"
    completed = "COMPLETED"
    on_hold = "ON_HOLD"

class Project(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(256))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    start_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    budget: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(String(32), default=ProjectStatus.planning.value)

    # deleting a project leaves its work items in place
    work_items = relationship("WorkItem", back_populates="project", passive_deletes="all")
