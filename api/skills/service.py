from pymongo import ASCENDING

from api.content import ContentService
from api.skills.schemas import SkillRequest, SkillUpdateRequest
from portfolio_store import SKILLS

skills = ContentService(SKILLS, "Skill", [("category", ASCENDING), ("name", ASCENDING)])


def list_skills() -> list[dict]:
    return skills.list()


def create_skill(request: SkillRequest) -> dict:
    return skills.create(request)


def update_skill(skill_id: str, request: SkillUpdateRequest) -> dict:
    return skills.update(skill_id, request)


def delete_skill(skill_id: str) -> None:
    skills.delete(skill_id)
