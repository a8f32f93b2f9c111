"""
Shared helpers for web handlers: container access, JSON bodies, error bodies
and the auth guards.
"""

import json
from functools import wraps
from typing import Optional

from aiohttp import web
from pydantic import BaseModel

from adapters.web.loader import Container
from core.domain.constants import ACCESS_TOKEN_COOKIE
from core.domain.models import Principal
from locales import t

CONTAINER_KEY = web.AppKey("container", Container)


def get_container(request: web.Request) -> Container:
    return request.app[CONTAINER_KEY]


def get_lang(request: web.Request) -> str:
    return request.get("lang", "it")


def get_principal(request: web.Request) -> Optional[Principal]:
    return request.get("principal")


def extract_token(request: web.Request) -> Optional[str]:
    """Bearer header first, then the HttpOnly session cookie"""
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        token = header[7:].strip()
        if token:
            return token
    return request.cookies.get(ACCESS_TOKEN_COOKIE) or None


def error_response(request: web.Request, key: str, status: int, **extra) -> web.Response:
    body = {"error": t(key, get_lang(request))}
    body.update(extra)
    return web.json_response(body, status=status)


def message_response(request: web.Request, key: str, status: int = 200, **extra) -> web.Response:
    body = {"message": t(key, get_lang(request))}
    body.update(extra)
    return web.json_response(body, status=status)


def dump(value):
    """Models (or lists of them) to JSON-ready dicts"""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list):
        return [dump(v) for v in value]
    return value


async def read_json(request: web.Request) -> dict:
    """Request body as a dict. Malformed bodies are a 400, not a 500."""
    if not request.can_read_body:
        return {}
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise web.HTTPBadRequest(
            text=json.dumps({"error": t("invalid_json", get_lang(request))}),
            content_type="application/json",
        )
    if not isinstance(body, dict):
        raise web.HTTPBadRequest(
            text=json.dumps({"error": t("invalid_json", get_lang(request))}),
            content_type="application/json",
        )
    return body


def require_auth(handler):
    """401 unless the request carries a valid session"""
    @wraps(handler)
    async def wrapper(request: web.Request):
        if get_principal(request) is None:
            return error_response(request, "unauthorized", 401)
        return await handler(request)
    return wrapper


def require_admin(handler):
    """401 without a session, 403 for non-admins"""
    @wraps(handler)
    async def wrapper(request: web.Request):
        principal = get_principal(request)
        if principal is None:
            return error_response(request, "unauthorized", 401)
        if not principal.is_admin:
            return error_response(request, "forbidden", 403)
        return await handler(request)
    return wrapper
