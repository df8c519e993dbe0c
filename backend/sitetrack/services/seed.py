import datetime as dt

from sqlalchemy.orm import Session

from sitetrack.core.logging import logger
from sitetrack.crud.projects import create_project, list_projects
from sitetrack.crud.work_items import create_work_item
from sitetrack.db.models.equipment import Equipment
from sitetrack.db.models.material import Material
from sitetrack.db.models.project import ProjectStatus
from sitetrack.db.models.work_item import WorkItemStatus
from sitetrack.db.models.worker import Worker
from sitetrack.db.session import SessionLocal
from sitetrack.schemas.project import ProjectCreate
from sitetrack.schemas.work_item import WorkItemCreate

DEMO_PROJECTS = [
    {
        "project": ProjectCreate(
            name="ABC High-rise Building",
            description="20-storey tower, District 1",
            start_date=dt.date(2024, 1, 1),
            end_date=dt.date(2024, 12, 31),
            budget=50_000_000_000,
            status=ProjectStatus.in_progress,
        ),
        "work_items": [
            (
                WorkItemCreate(
                    name="Foundation excavation",
                    description="5 m deep excavation for the tower footprint",
                    unit="m3",
                    design_quantity=500,
                    unit_price=200_000,
                    start_date=dt.date(2024, 1, 1),
                    end_date=dt.date(2024, 2, 15),
                ),
                150.0,
                WorkItemStatus.in_progress,
            ),
            (
                WorkItemCreate(
                    name="Foundation concrete",
                    description="Reinforced concrete pour for the foundation",
                    unit="m3",
                    design_quantity=300,
                    unit_price=2_500_000,
                    start_date=dt.date(2024, 2, 16),
                    end_date=dt.date(2024, 3, 30),
                ),
                0.0,
                WorkItemStatus.not_started,
            ),
        ],
    },
    {
        "project": ProjectCreate(
            name="XYZ Residential Area",
            description="100-unit residential development",
            start_date=dt.date(2024, 3, 1),
            end_date=dt.date(2025, 3, 1),
            budget=30_000_000_000,
        ),
        "work_items": [],
    },
]


def _seed_resources(db: Session) -> None:
    db.add_all([
        Material(name="Cement PC40", category="cement", unit="t", unit_price=3_500_000,
                 stock_quantity=50, minimum_stock=10, supplier="Ha Tien Cement"),
        Material(name="Masonry sand", category="sand", unit="m3", unit_price=450_000,
                 stock_quantity=200, minimum_stock=20, supplier="ABC Building Materials"),
        Equipment(name="Komatsu PC200 excavator", type="excavator", model="PC200-8", status="IN_USE",
                  daily_rate=2_500_000, last_maintenance=dt.date(2024, 1, 1), next_maintenance=dt.date(2024, 4, 1)),
        Equipment(name="QTZ63 tower crane", type="crane", model="QTZ63", status="AVAILABLE",
                  daily_rate=3_000_000, last_maintenance=dt.date(2023, 12, 15), next_maintenance=dt.date(2024, 3, 15)),
        Worker(employee_code="NV001", name="Nguyen Van An", position="foreman", skill_level=4,
               hourly_rate=50_000, daily_rate=400_000, hire_date=dt.date(2023, 1, 15)),
        Worker(employee_code="NV002", name="Tran Thi Binh", position="engineer", skill_level=5,
               hourly_rate=80_000, daily_rate=640_000, hire_date=dt.date(2022, 6, 1)),
    ])
    db.commit()


def seed_demo(db: Session | None = None) -> bool:
    """Populate an empty database with sample data. Returns True if it seeded."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        if list_projects(db):
            return False
        for entry in DEMO_PROJECTS:
            p = create_project(db, entry["project"])
            for data, completed, status in entry["work_items"]:
                wi = create_work_item(db, p.id, data)
                # progress is only recorded by direct store writes
                wi.completed_quantity = completed
                wi.status = status.value
            db.commit()
        _seed_resources(db)
        logger.info("demo_seeded", projects=len(DEMO_PROJECTS))
        return True
    finally:
        if own_session:
            db.close()
