from pymongo import DESCENDING

from api.content import ContentService
from api.projects.schemas import ProjectRequest, ProjectUpdateRequest
from portfolio_store import PROJECTS

projects = ContentService(PROJECTS, "Project", [("createdAt", DESCENDING)])


def list_projects() -> list[dict]:
    return projects.list()


def get_project(project_id: str) -> dict:
    return projects.get(project_id)


def create_project(request: ProjectRequest) -> dict:
    return projects.create(request)


def update_project(project_id: str, request: ProjectUpdateRequest) -> dict:
    return projects.update(project_id, request)


def delete_project(project_id: str) -> None:
    projects.delete(project_id)
