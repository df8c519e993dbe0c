"""Central UI state: an immutable AppState and a pure reducer over actions."""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable


class ActionType(str, Enum):
    SET_LOADING = "SET_LOADING"
    SET_ERROR = "SET_ERROR"
    SET_PROJECTS = "SET_PROJECTS"
    SET_CURRENT_PROJECT = "SET_CURRENT_PROJECT"
    SET_WORK_ITEMS = "SET_WORK_ITEMS"
    ADD_PROJECT = "ADD_PROJECT"
    UPDATE_PROJECT = "UPDATE_PROJECT"
    DELETE_PROJECT = "DELETE_PROJECT"
    ADD_WORK_ITEM = "ADD_WORK_ITEM"


@dataclass(frozen=True)
class Action:
    type: ActionType | str
    payload: Any = None


@dataclass(frozen=True)
class AppState:
    projects: tuple = ()
    current_project: dict | None = None
    work_items: tuple = ()
    loading: bool = False
    error: str | None = None


def _same_id(a: dict | None, project_id) -> bool:
    return a is not None and a.get("id") == project_id


def app_reducer(state: AppState, action: Action) -> AppState:
    t = action.type
    p = action.payload
    if t == ActionType.SET_LOADING:
        return replace(state, loading=bool(p))
    if t == ActionType.SET_ERROR:
        return replace(state, error=p, loading=False)
    if t == ActionType.SET_PROJECTS:
        return replace(state, projects=tuple(p), loading=False)
    if t == ActionType.SET_CURRENT_PROJECT:
        return replace(state, current_project=p, loading=False)
    if t == ActionType.SET_WORK_ITEMS:
        return replace(state, work_items=tuple(p), loading=False)
    if t == ActionType.ADD_PROJECT:
        return replace(state, projects=state.projects + (p,), loading=False)
    if t == ActionType.UPDATE_PROJECT:
        pid = p.get("id")
        return replace(
            state,
            projects=tuple(p if _same_id(x, pid) else x for x in state.projects),
            current_project=p if _same_id(state.current_project, pid) else state.current_project,
            loading=False,
        )
    if t == ActionType.DELETE_PROJECT:
        return replace(
            state,
            projects=tuple(x for x in state.projects if not _same_id(x, p)),
            current_project=None if _same_id(state.current_project, p) else state.current_project,
            loading=False,
        )
    if t == ActionType.ADD_WORK_ITEM:
        return replace(state, work_items=state.work_items + (p,), loading=False)
    return state


@dataclass
class AppStore:
    state: AppState = field(default_factory=AppState)
    reducer: Callable[[AppState, Action], AppState] = app_reducer
    _listeners: list = field(default_factory=list, repr=False)

    def dispatch(self, action: Action) -> AppState:
        self.state = self.reducer(self.state, action)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    def subscribe(self, listener: Callable[[AppState], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
