import datetime as dt

from sqlalchemy import func
from sqlalchemy.orm import Session

from sitetrack.core.logging import logger
from sitetrack.db.models._mixins import utcnow
from sitetrack.db.models.project import Project, ProjectStatus
from sitetrack.db.models.work_item import WorkItem
from sitetrack.schemas.project import ProjectCreate, ProjectUpdate


def _next_updated_at(previous: dt.datetime | None) -> dt.datetime:
    # updated_at must move forward even when the clock has not ticked
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + dt.timedelta(microseconds=1)
    return now


def list_projects(db: Session):
    """Projects newest first, with work item count and quantity totals.

    Returns rows of ``(Project, work_item_count, total_design_quantity,
    total_completed_quantity)``.
    """
    return (
        db.query(
            Project,
            func.count(WorkItem.id),
            func.coalesce(func.sum(WorkItem.design_quantity), 0.0),
            func.coalesce(func.sum(WorkItem.completed_quantity), 0.0),
        )
        .outerjoin(WorkItem, WorkItem.project_id == Project.id)
        .group_by(Project.id)
        .order_by(Project.created_at.desc())
        .all()
    )

def get_project(db: Session, project_id: str) -> Project | None:
    return db.query(Project).filter(Project.id == project_id).one_or_none()

def create_project(db: Session, data: ProjectCreate) -> Project:
    now = utcnow()
    p = Project(
        name=data.name,
        description=data.description or None,
        start_date=data.start_date,
        end_date=data.end_date,
        budget=data.budget or None,
        status=(data.status or ProjectStatus.planning).value,
        created_at=now,
        updated_at=now,
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    logger.info("project_created", project_id=p.id, name=p.name)
    return p


def update_project(db: Session, p: Project, data: ProjectUpdate) -> Project:
    changes = data.model_dump(exclude_unset=True)
    if "budget" in changes:
        changes["budget"] = changes["budget"] or None
    if "status" in changes:
        changes["status"] = ProjectStatus(changes["status"]).value

    for field, value in changes.items():
        setattr(p, field, value)
    p.updated_at = _next_updated_at(p.updated_at)

    db.commit()
    db.refresh(p)
    logger.info("project_updated", project_id=p.id, fields=sorted(changes))
    return p


def delete_project(db: Session, project_id: str) -> bool:
    """Delete the project row only; its work items stay in the table."""
    deleted = (
        db.query(Project)
        .filter(Project.id == project_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("project_deleted", project_id=project_id)
    return deleted > 0
