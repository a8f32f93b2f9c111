"""
Auth endpoints - email/password sign up and sign in, session cookie, whoami.
"""

import logging

from aiohttp import web

from adapters.web.utils import (
    error_response,
    extract_token,
    get_container,
    get_principal,
    message_response,
    read_json,
    require_auth,
)
from core.domain.constants import ACCESS_TOKEN_COOKIE, ACCESS_TOKEN_MAX_AGE
from core.domain.models import AuthResult, Credentials

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def _set_session_cookie(request: web.Request, response: web.Response, token: str) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token,
        max_age=ACCESS_TOKEN_MAX_AGE,
        httponly=True,
        secure=get_container(request).settings.cookie_secure,
        samesite="Lax",
        path="/",
    )


def _auth_response(request: web.Request, result: AuthResult) -> web.Response:
    if not result.ok:
        status = 400 if result.message == "auth_missing_credentials" else 401
        return error_response(request, result.message, status)

    body = {}
    if result.principal:
        body["user"] = {
            "id": result.principal.id,
            "email": result.principal.email,
            "is_admin": result.principal.is_admin,
        }
        body["access_token"] = result.access_token
        body["refresh_token"] = result.refresh_token
    response = message_response(request, result.message, **body)
    if result.access_token:
        _set_session_cookie(request, response, result.access_token)
    return response


@routes.post("/api/auth/sign-up")
async def sign_up(request: web.Request) -> web.Response:
    body = Credentials.model_validate(await read_json(request))
    result = await get_container(request).auth_service.sign_up(body.email, body.password)
    return _auth_response(request, result)


@routes.post("/api/auth/sign-in")
async def sign_in(request: web.Request) -> web.Response:
    body = Credentials.model_validate(await read_json(request))
    result = await get_container(request).auth_service.sign_in(body.email, body.password)
    return _auth_response(request, result)


@routes.post("/api/auth/sign-out")
async def sign_out(request: web.Request) -> web.Response:
    await get_container(request).auth_service.sign_out(extract_token(request))
    response = message_response(request, "auth_signed_out")
    response.del_cookie(ACCESS_TOKEN_COOKIE, path="/")
    return response


@routes.get("/api/auth/me")
@require_auth
async def me(request: web.Request) -> web.Response:
    principal = get_principal(request)
    return web.json_response({
        "id": principal.id,
        "email": principal.email,
        "is_admin": principal.is_admin,
    })
