import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.auth.router import router as auth_router
from api.auth.service import seed_admin_user
from api.contact.router import router as contact_router
from api.education.router import router as education_router
from api.experience.router import router as experience_router
from api.portfolio.router import router as portfolio_router
from api.profile.router import router as profile_router
from api.projects.router import router as projects_router
from api.skills.router import router as skills_router
from api.social_links.router import router as social_links_router
from api.templates.router import router as templates_router
from api.user_profile.router import router as user_profile_router
from portfolio_store import ensure_indexes

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    try:
        ensure_indexes()
        seed_admin_user()
    except Exception:
        logger.exception("Startup tasks failed")
    yield


def _allowed_origins() -> list[str]:
    raw = os.getenv("ALLOWED_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(title="Portfolio CMS", version="1.0.0", lifespan=lifespan)

origins = _allowed_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(skills_router)
app.include_router(experience_router)
app.include_router(education_router)
app.include_router(projects_router)
app.include_router(social_links_router)
app.include_router(templates_router)
app.include_router(user_profile_router)
app.include_router(portfolio_router)
app.include_router(contact_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
