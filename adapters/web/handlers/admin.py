"""
Admin dashboard endpoints.

Content CRUD for members, best games, FAQs and footer resources, plus the
role management tab (registered users, admin toggle, first-admin bootstrap).
"""

import logging
from typing import Awaitable, Callable

from aiohttp import web

from adapters.web.utils import (
    dump,
    error_response,
    get_container,
    get_lang,
    get_principal,
    message_response,
    read_json,
    require_admin,
    require_auth,
)
from core.domain.models import AdminToggleRequest
from locales import t

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

# Failed admin toggles -> HTTP status
TOGGLE_ERROR_STATUS = {
    "admin_cannot_change_self": 400,
    "admin_first_protected": 400,
    "admin_not_found": 404,
}

BOOTSTRAP_ERROR_STATUS = {
    "bootstrap_disabled": 403,
    "bootstrap_refused": 409,
}


def _crud(
    path: str,
    prefix: str,
    service: Callable,
    list_name: str,
    create_name: str,
    update_name: str,
    delete_name: str,
) -> None:
    """
    Register GET/POST on path and PUT/DELETE on path/{id}.
    service(container) returns the service; *_name are its method names,
    prefix picks the "<prefix>_created/updated/deleted" messages.
    """

    @require_admin
    async def list_items(request: web.Request) -> web.Response:
        items = await getattr(service(get_container(request)), list_name)()
        return web.json_response(dump(items))

    @require_admin
    async def create_item(request: web.Request) -> web.Response:
        body = await read_json(request)
        item = await getattr(service(get_container(request)), create_name)(body)
        logger.info(f"[ADMIN] {get_principal(request).email} created {prefix} {item.id}")
        return message_response(request, f"{prefix}_created", 201, item=dump(item))

    @require_admin
    async def update_item(request: web.Request) -> web.Response:
        item_id = request.match_info["id"]
        body = await read_json(request)
        item = await getattr(service(get_container(request)), update_name)(item_id, body)
        if not item:
            return error_response(request, "not_found", 404)
        return message_response(request, f"{prefix}_updated", item=dump(item))

    @require_admin
    async def delete_item(request: web.Request) -> web.Response:
        item_id = request.match_info["id"]
        deleted = await getattr(service(get_container(request)), delete_name)(item_id)
        if not deleted:
            return error_response(request, "not_found", 404)
        logger.info(f"[ADMIN] {get_principal(request).email} deleted {prefix} {item_id}")
        return message_response(request, f"{prefix}_deleted")

    routes.get(path)(list_items)
    routes.post(path)(create_item)
    routes.put(path + "/{id}")(update_item)
    routes.delete(path + "/{id}")(delete_item)


def _toggle(path: str, prefix: str, toggle: Callable[..., Callable[[str], Awaitable]]) -> None:
    """POST path/{id}/toggle flips is_active"""

    @require_admin
    async def toggle_item(request: web.Request) -> web.Response:
        item = await toggle(get_container(request))(request.match_info["id"])
        if not item:
            return error_response(request, "not_found", 404)
        key = f"{prefix}_activated" if item.is_active else f"{prefix}_deactivated"
        return message_response(request, key, item=dump(item))

    routes.post(path + "/{id}/toggle")(toggle_item)


# === CONTENT ===

_crud(
    "/api/admin/members", "member",
    lambda c: c.member_service,
    "list_members", "create_member", "update_member", "delete_member",
)
_crud(
    "/api/admin/best-games", "game",
    lambda c: c.game_service,
    "list_games", "create_game", "update_game", "delete_game",
)
_crud(
    "/api/admin/faqs", "faq",
    lambda c: c.faq_service,
    "list_faqs", "create_faq", "update_faq", "delete_faq",
)
_crud(
    "/api/admin/footer", "resource",
    lambda c: c.footer_service,
    "list_resources", "create_resource", "update_resource", "delete_resource",
)
_toggle("/api/admin/faqs", "faq", lambda c: c.faq_service.toggle_faq)
_toggle("/api/admin/footer", "resource", lambda c: c.footer_service.toggle_resource)


# === USERS / ROLES ===

@routes.get("/api/admin/users")
@require_admin
async def list_users(request: web.Request) -> web.Response:
    users = await get_container(request).admin_service.users_overview()
    return web.json_response(users)


@routes.post("/api/admin/users/{id}/toggle")
@require_admin
async def toggle_user(request: web.Request) -> web.Response:
    user_id = request.match_info["id"]
    body = AdminToggleRequest.model_validate(await read_json(request))
    ok, key, admins = await get_container(request).admin_service.toggle_admin(
        actor=get_principal(request),
        user_id=user_id,
        email=body.email,
        currently_admin=body.is_admin,
    )
    if not ok:
        return error_response(request, key, TOGGLE_ERROR_STATUS.get(key, 400))

    email = next((a.email for a in admins if a.id == user_id and a.email), None) or body.email or user_id
    return web.json_response({
        "message": t(key, get_lang(request), email=email),
        "admins": dump(admins),
    })


@routes.post("/api/admin/bootstrap")
@require_auth
async def bootstrap(request: web.Request) -> web.Response:
    principal = get_principal(request)
    ok, key = await get_container(request).admin_service.bootstrap_admin(principal)
    if not ok:
        return error_response(request, key, BOOTSTRAP_ERROR_STATUS.get(key, 400))
    return message_response(request, key, is_admin=True)
