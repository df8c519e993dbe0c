# import all models for Alembic and create_all
from sitetrack.db.models.project import Project, ProjectStatus
from sitetrack.db.models.work_item import WorkItem, WorkItemStatus
from sitetrack.db.models.material import Material
from sitetrack.db.models.equipment import Equipment
from sitetrack.db.models.worker import Worker
