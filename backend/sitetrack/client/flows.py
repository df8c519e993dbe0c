"""Page-level flows: the loading / result / error sequences a view dispatches.

A transport error, an error status or an undecodable body all end in one
generic SET_ERROR per flow.
"""
import httpx

from sitetrack.client.api import ProjectService
from sitetrack.client.state import Action, ActionType, AppStore
from sitetrack.core.logging import logger

LOAD_PROJECTS_ERROR = "Could not load the project list"
CREATE_PROJECT_ERROR = "Could not create the project"
LOAD_PROJECT_ERROR = "Could not load the project"
UPDATE_PROJECT_ERROR = "Could not update the project"
DELETE_PROJECT_ERROR = "Could not delete the project"
CREATE_WORK_ITEM_ERROR = "Could not create the work item"


def _fail(store: AppStore, message: str, exc: Exception) -> None:
    logger.warning("client_action_failed", message=message, error=str(exc))
    store.dispatch(Action(ActionType.SET_ERROR, message))


def load_projects(store: AppStore, service: ProjectService) -> None:
    store.dispatch(Action(ActionType.SET_LOADING, True))
    try:
        projects = service.get_all()
    except (httpx.HTTPError, ValueError) as e:
        _fail(store, LOAD_PROJECTS_ERROR, e)
        return
    store.dispatch(Action(ActionType.SET_PROJECTS, projects))


def create_project(store: AppStore, service: ProjectService, project: dict) -> dict | None:
    store.dispatch(Action(ActionType.SET_LOADING, True))
    try:
        created = service.create(project)
    except (httpx.HTTPError, ValueError) as e:
        _fail(store, CREATE_PROJECT_ERROR, e)
        return None
    store.dispatch(Action(ActionType.ADD_PROJECT, created))
    return created


def load_project_detail(store: AppStore, service: ProjectService, project_id: str) -> None:
    store.dispatch(Action(ActionType.SET_LOADING, True))
    try:
        project = service.get_by_id(project_id)
        store.dispatch(Action(ActionType.SET_CURRENT_PROJECT, project))
        work_items = service.get_work_items(project_id)
    except (httpx.HTTPError, ValueError) as e:
        _fail(store, LOAD_PROJECT_ERROR, e)
        return
    store.dispatch(Action(ActionType.SET_WORK_ITEMS, work_items))


def update_project(store: AppStore, service: ProjectService, project_id: str, changes: dict) -> dict | None:
    store.dispatch(Action(ActionType.SET_LOADING, True))
    try:
        updated = service.update(project_id, changes)
    except (httpx.HTTPError, ValueError) as e:
        _fail(store, UPDATE_PROJECT_ERROR, e)
        return None
    store.dispatch(Action(ActionType.UPDATE_PROJECT, updated))
    return updated


def delete_project(store: AppStore, service: ProjectService, project_id: str) -> bool:
    store.dispatch(Action(ActionType.SET_LOADING, True))
    try:
        service.delete(project_id)
    except (httpx.HTTPError, ValueError) as e:
        _fail(store, DELETE_PROJECT_ERROR, e)
        return False
    store.dispatch(Action(ActionType.DELETE_PROJECT, project_id))
    return True


def create_work_item(store: AppStore, service: ProjectService, project_id: str, work_item: dict) -> dict | None:
    store.dispatch(Action(ActionType.SET_LOADING, True))
    try:
        created = service.create_work_item(project_id, work_item)
    except (httpx.HTTPError, ValueError) as e:
        _fail(store, CREATE_WORK_ITEM_ERROR, e)
        return None
    store.dispatch(Action(ActionType.ADD_WORK_ITEM, created))
    return created
