from pymongo import DESCENDING

from api.content import DatedContentService
from api.experience.schemas import ExperienceRequest, ExperienceUpdateRequest
from portfolio_store import EXPERIENCE

experiences = DatedContentService(EXPERIENCE, "Experience", [("startDate", DESCENDING)])


def list_experience() -> list[dict]:
    return experiences.list()


def create_experience(request: ExperienceRequest) -> dict:
    return experiences.create(request)


def update_experience(experience_id: str, request: ExperienceUpdateRequest) -> dict:
    return experiences.update(experience_id, request)


def delete_experience(experience_id: str) -> None:
    experiences.delete(experience_id)
