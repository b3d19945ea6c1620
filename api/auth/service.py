import logging
import os

from dotenv import load_dotenv

from api.auth.schemas import ChangePasswordRequest, LoginRequest, TokenResponse
from api.security import Session, create_access_token, hash_password, verify_password
from errors import NotFoundError, UnauthorizedError, ValidationFailedError
from portfolio_store import USERS, find_document, get_document, insert_document, update_document

logger = logging.getLogger(__name__)


def seed_admin_user() -> bool:
    """Create the admin account from ADMIN_EMAIL / ADMIN_PASSWORD if it is missing.

    Returns True when a user was created.
    """
    load_dotenv()
    admin_email = os.getenv("ADMIN_EMAIL", "admin@example.com").strip().lower()
    admin_password = os.getenv("ADMIN_PASSWORD", "admin123")

    if find_document(USERS, {"email": admin_email}):
        logger.info("Admin user already exists")
        return False

    insert_document(USERS, {"email": admin_email, "passwordHash": hash_password(admin_password)})
    logger.info("Admin user created successfully")
    return True


def login(request: LoginRequest) -> TokenResponse:
    user = find_document(USERS, {"email": request.email.strip().lower()})
    if not user or not verify_password(request.password, user.get("passwordHash", "")):
        raise UnauthorizedError("Invalid credentials")
    return TokenResponse(access_token=create_access_token(user["id"], user["email"]))


def change_password(session: Session, request: ChangePasswordRequest) -> None:
    user = get_document(USERS, session.user_id)
    if not user:
        raise NotFoundError("User not found")
    if not verify_password(request.current_password, user.get("passwordHash", "")):
        raise ValidationFailedError("Current password is incorrect")

    update_document(USERS, user["id"], {"passwordHash": hash_password(request.new_password)})
    logger.info("Password updated for user %s", user["id"])
