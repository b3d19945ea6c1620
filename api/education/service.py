from pymongo import DESCENDING

from api.content import DatedContentService
from api.education.schemas import EducationRequest, EducationUpdateRequest
from portfolio_store import EDUCATION

education_entries = DatedContentService(EDUCATION, "Education", [("startDate", DESCENDING)])


def list_education() -> list[dict]:
    return education_entries.list()


def create_education(request: EducationRequest) -> dict:
    return education_entries.create(request)


def update_education(education_id: str, request: EducationUpdateRequest) -> dict:
    return education_entries.update(education_id, request)


def delete_education(education_id: str) -> None:
    education_entries.delete(education_id)
