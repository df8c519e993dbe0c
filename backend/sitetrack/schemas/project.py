import datetime as dt
from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitetrack.db.models.project import ProjectStatus
from sitetrack.schemas.work_item import WorkItemOut


class ProjectBase(BaseModel):
    # camelCase on the wire, snake_case also accepted
    model_config = ConfigDict(populate_by_name=True)

    description: str | None = None
    start_date: dt.date | None = Field(default=None, alias="startDate")
    end_date: dt.date | None = Field(default=None, alias="endDate")
    budget: float | None = None
    status: ProjectStatus | None = None

    @field_validator("start_date", "end_date", "budget", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ProjectCreate(ProjectBase):
    name: str = Field(..., min_length=1)


class ProjectUpdate(ProjectBase):
    name: str | None = Field(default=None, min_length=1)

    @field_validator("name", "status")
    @classmethod
    def _not_null(cls, v):
        # only runs for values sent explicitly
        if v is None:
            raise ValueError("must not be null")
        return v


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    name: str
    description: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    budget: float | None = None
    status: str
    created_at: dt.datetime
    updated_at: dt.datetime


class ProjectSummaryOut(ProjectOut):
    work_item_count: int = 0
    total_design_quantity: float = 0.0
    total_completed_quantity: float = 0.0
    completion_percentage: float = Field(default=0.0, alias="completionPercentage")


class ProjectDetailOut(ProjectOut):
    work_items: list[WorkItemOut] = Field(default_factory=list, alias="workItems")
    completion_percentage: float = Field(default=0.0, alias="completionPercentage")
