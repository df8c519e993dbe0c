from sqlalchemy.orm import Session

from sitetrack.core.logging import logger
from sitetrack.db.models._mixins import utcnow
from sitetrack.db.models.work_item import WorkItem, WorkItemStatus
from sitetrack.schemas.work_item import WorkItemCreate

def list_work_items(db: Session, project_id: str):
    return (
        db.query(WorkItem)
        .filter(WorkItem.project_id == project_id)
        .order_by(WorkItem.created_at.asc())
        .all()
    )

def get_work_item(db: Session, work_item_id: str) -> WorkItem | None:
    return db.query(WorkItem).filter(WorkItem.id == work_item_id).one_or_none()

def create_work_item(db: Session, project_id: str, data: WorkItemCreate) -> WorkItem:
    now = utcnow()
    wi = WorkItem(
        project_id=project_id,
        name=data.name,
        description=data.description or None,
        unit=data.unit,
        design_quantity=float(data.design_quantity),
        completed_quantity=0.0,
        unit_price=float(data.unit_price),
        start_date=data.start_date,
        end_date=data.end_date,
        status=WorkItemStatus.not_started.value,
        created_at=now,
        updated_at=now,
    )
    db.add(wi)
    db.commit()
    db.refresh(wi)
    logger.info("work_item_created", work_item_id=wi.id, project_id=project_id)
    return wi
