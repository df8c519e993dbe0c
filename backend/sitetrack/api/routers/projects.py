from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from sitetrack.core.deps import get_db
from sitetrack.crud.projects import create_project, delete_project, get_project, list_projects, update_project
from sitetrack.crud.work_items import create_work_item, list_work_items
from sitetrack.schemas.project import (
    ProjectCreate,
    ProjectDetailOut,
    ProjectOut,
    ProjectSummaryOut,
    ProjectUpdate,
)
from sitetrack.schemas.work_item import WorkItemCreate, WorkItemOut
from sitetrack.services.progress import completion_percentage, project_completion

router = APIRouter()


def _require_project(db: Session, project_id: str):
    p = get_project(db, project_id)
    if not p:
        raise HTTPException(status_code=404, detail="Project not found")
    return p


@router.get("", response_model=list[ProjectSummaryOut])
def get_projects(db: Session = Depends(get_db)):
    out: list[ProjectSummaryOut] = []
    for p, count, total_design, total_completed in list_projects(db):
        out.append(
            ProjectSummaryOut(
                **ProjectOut.model_validate(p).model_dump(),
                work_item_count=count,
                total_design_quantity=total_design,
                total_completed_quantity=total_completed,
                completion_percentage=completion_percentage(total_completed, total_design),
            )
        )
    return out


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def post_project(data: ProjectCreate, db: Session = Depends(get_db)):
    return create_project(db, data)


@router.get("/{project_id}", response_model=ProjectDetailOut)
def get_project_detail(project_id: str, db: Session = Depends(get_db)):
    p = _require_project(db, project_id)
    work_items = list_work_items(db, project_id)
    return ProjectDetailOut(
        **ProjectOut.model_validate(p).model_dump(),
        work_items=[WorkItemOut.model_validate(wi) for wi in work_items],
        completion_percentage=project_completion(work_items),
    )


@router.put("/{project_id}", response_model=ProjectOut)
def put_project(project_id: str, data: ProjectUpdate, db: Session = Depends(get_db)):
    p = _require_project(db, project_id)
    return update_project(db, p, data)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_project(project_id: str, db: Session = Depends(get_db)):
    if not delete_project(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# The project id is not checked here: an unknown project simply has no work items.
@router.get("/{project_id}/work-items", response_model=list[WorkItemOut])
def get_project_work_items(project_id: str, db: Session = Depends(get_db)):
    return list_work_items(db, project_id)


@router.post("/{project_id}/work-items", response_model=WorkItemOut, status_code=status.HTTP_201_CREATED)
def post_project_work_item(project_id: str, data: WorkItemCreate, db: Session = Depends(get_db)):
    return create_work_item(db, project_id, data)
