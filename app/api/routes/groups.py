"""Group pages and the subscribe/unsubscribe routes their links point at."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from api.dependencies.formatter import SubscribeFormatterDep
from api.dependencies.session import CurrentAccountDep
from api.routes.pages import render_page
from infrastructure.logging import get_module_logger
from infrastructure.services import (
    EntityStorageDep,
    MembershipManagerDep,
    OgAccessDep,
    SettingsDep,
    TranslatorDep,
    UrlGeneratorDep,
)
from modules.og import SUBSCRIBE, SUBSCRIBE_WITHOUT_APPROVAL
from modules.og.domain import (
    AccessDeniedError,
    MembershipError,
    MembershipState,
)
from modules.subscribe import render_html

logger = get_module_logger()
router = APIRouter(tags=["Groups"])

MEMBER_STATES = (MembershipState.ACTIVE, MembershipState.PENDING)


def _login_redirect(urls, request: Request) -> RedirectResponse:
    login = urls.url_for("user.login", query={"destination": request.url.path})
    return RedirectResponse(url=str(login), status_code=303)


@router.get("/node/{node}", name="entity.node.canonical", response_class=HTMLResponse)
def view_group(
    node: int,
    storage: EntityStorageDep,
    formatter: SubscribeFormatterDep,
    settings: SettingsDep,
):
    """Group page: the title followed by the subscribe formatter output."""
    group = storage.load_group("node", node)
    build = formatter.view_elements(group)
    body = f'<div class="field field--og-group">{render_html(build)}</div>'
    response = HTMLResponse(render_page(group.title, body, settings.SITE_NAME))
    response.headers["X-Cache-Contexts"] = " ".join(build["cache"]["contexts"])
    return response


@router.api_route(
    "/group/{entity_type_id}/{group}/subscribe",
    methods=["GET", "POST"],
    name="og.subscribe",
)
def subscribe(
    entity_type_id: str,
    group: int,
    request: Request,
    account: CurrentAccountDep,
    storage: EntityStorageDep,
    memberships: MembershipManagerDep,
    og_access: OgAccessDep,
    urls: UrlGeneratorDep,
    translator: TranslatorDep,
):
    """Join a group, or request to join it when approval is required."""
    entity = storage.load_group(entity_type_id, group)

    if account.is_anonymous:
        return _login_redirect(urls, request)

    if memberships.is_member(entity, account, MEMBER_STATES):
        logger.info(
            "subscribe_skipped_existing_member",
            group_id=entity.id,
            user_id=account.id,
        )
        return RedirectResponse(url=entity.canonical_path, status_code=303)

    if memberships.is_member_blocked(entity, account):
        raise AccessDeniedError(
            SUBSCRIBE,
            translator.translate(
                "pages.access_denied", variables={"group_title": entity.title}
            ),
        )

    if og_access.user_access(entity, SUBSCRIBE_WITHOUT_APPROVAL, account).is_allowed:
        state = MembershipState.ACTIVE
    elif og_access.user_access(entity, SUBSCRIBE, account).is_allowed:
        state = MembershipState.PENDING
    else:
        raise AccessDeniedError(
            SUBSCRIBE,
            translator.translate(
                "pages.access_denied", variables={"group_title": entity.title}
            ),
        )

    memberships.create_membership(entity, account, state)
    return RedirectResponse(url=entity.canonical_path, status_code=303)


@router.api_route(
    "/group/{entity_type_id}/{group}/unsubscribe",
    methods=["GET", "POST"],
    name="og.unsubscribe",
)
def unsubscribe(
    entity_type_id: str,
    group: int,
    request: Request,
    account: CurrentAccountDep,
    storage: EntityStorageDep,
    memberships: MembershipManagerDep,
    urls: UrlGeneratorDep,
    translator: TranslatorDep,
):
    """Leave a group. Group managers cannot leave their own group."""
    entity = storage.load_group(entity_type_id, group)

    if account.is_anonymous:
        return _login_redirect(urls, request)

    if entity.is_owned_by(account):
        raise MembershipError(
            translator.translate(
                "pages.owner_cannot_unsubscribe",
                variables={"group_title": entity.title},
            ),
            entity.title,
        )

    if memberships.is_member_blocked(entity, account):
        raise AccessDeniedError(
            "unsubscribe",
            translator.translate(
                "pages.access_denied", variables={"group_title": entity.title}
            ),
        )

    if not memberships.delete_membership(entity, account):
        logger.info(
            "unsubscribe_skipped_not_member",
            group_id=entity.id,
            user_id=account.id,
        )
    return RedirectResponse(url=entity.canonical_path, status_code=303)
