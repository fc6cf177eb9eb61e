from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel, Field

from api.dependencies.rate_limits import get_limiter, login_rate_limit
from api.dependencies.session import CurrentAccountDep, create_session_token
from api.routes.pages import render_page
from infrastructure.logging import get_module_logger
from infrastructure.routing import is_local_path
from infrastructure.services import EntityStorageDep, SettingsDep, TranslatorDep
from modules.og.domain import EntityNotFoundError

logger = get_module_logger()
router = APIRouter(prefix="/user", tags=["Authentication"])
limiter = get_limiter()


class LoginRequest(BaseModel):
    name: str = Field(min_length=1)


def _safe_destination(destination: Optional[str]) -> str:
    if destination and is_local_path(destination):
        return destination
    return "/"


@router.get("/login", name="user.login", response_class=HTMLResponse)
def login_page(
    settings: SettingsDep,
    translator: TranslatorDep,
    destination: Optional[str] = None,
    locale: str = "en-US",
):
    """Login page. The form posts back to the same URL."""
    target = _safe_destination(destination)
    intro = translator.translate(
        "pages.login_intro", locale, variables={"destination": target}
    )
    title = translator.translate("pages.login_title", locale)
    return HTMLResponse(render_page(title, f"<p>{intro}</p>", settings.SITE_NAME))


@router.post("/login", name="user.login")
@limiter.limit(login_rate_limit)
def login(
    request: Request,
    payload: LoginRequest,
    settings: SettingsDep,
    storage: EntityStorageDep,
    destination: Optional[str] = None,
):
    """Start a session for an existing account and redirect to the destination."""
    account = storage.find_account_by_name(payload.name)
    if account is None:
        logger.warning("login_failed", name=payload.name)
        raise EntityNotFoundError("user", payload.name)

    response = RedirectResponse(url=_safe_destination(destination), status_code=303)
    response.set_cookie(
        settings.server.SESSION_COOKIE_NAME,
        create_session_token(account.id),
        max_age=settings.server.SESSION_MAX_AGE_MINUTES * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="strict" if settings.is_production else "lax",
    )
    logger.info("login_succeeded", user_id=account.id)
    return response


@router.get("/logout", name="user.logout")
def logout(account: CurrentAccountDep, settings: SettingsDep):
    """End the current session."""
    response = RedirectResponse(url="/", status_code=303)
    response.delete_cookie(settings.server.SESSION_COOKIE_NAME)
    if account.is_authenticated:
        logger.info("logout_succeeded", user_id=account.id)
    return response
