import datetime as dt
from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkItemCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    unit: str = Field(..., min_length=1)
    design_quantity: float = Field(..., ge=0, alias="designQuantity")
    unit_price: float = Field(..., ge=0, alias="unitPrice")
    description: str | None = None
    start_date: dt.date | None = Field(default=None, alias="startDate")
    end_date: dt.date | None = Field(default=None, alias="endDate")

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _blank_date(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class WorkItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    name: str
    description: str | None = None
    unit: str
    design_quantity: float
    completed_quantity: float
    unit_price: float
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    status: str
    created_at: dt.datetime
    updated_at: dt.datetime
