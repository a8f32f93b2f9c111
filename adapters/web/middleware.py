"""
Middleware for the web app.

- error_middleware: maps validation / backend failures to JSON errors
- language_middleware: detects request language into request["lang"]
- auth_middleware: resolves the caller into request["principal"]
- request_log_middleware: one line per request (LOG_REQUESTS)
"""

import logging
import time

from aiohttp import web
from postgrest.exceptions import APIError
from pydantic import ValidationError

from adapters.web.utils import error_response, extract_token, get_container
from core.domain.constants import LANG_COOKIE
from core.utils.language import detect_lang

logger = logging.getLogger(__name__)

# Only these prefixes need the caller's identity; public reads skip the auth round trip
AUTH_PREFIXES = ("/api/auth", "/api/admin")


@web.middleware
async def error_middleware(request: web.Request, handler):
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except ValidationError as e:
        logger.info(f"[WEB] Validation failed on {request.method} {request.path}: {e.error_count()} errors")
        return error_response(
            request, "validation_error", 400,
            details=e.errors(include_url=False, include_context=False),
        )
    except APIError as e:
        logger.error(f"[WEB] Database error on {request.method} {request.path}: {e.message}")
        return error_response(request, "server_error", 500)
    except Exception as e:
        logger.error(f"[WEB] Unhandled error on {request.method} {request.path}: {e}", exc_info=True)
        return error_response(request, "server_error", 500)


@web.middleware
async def language_middleware(request: web.Request, handler):
    container = get_container(request)
    request["lang"] = detect_lang(
        query=request.query.get("lang"),
        cookie=request.cookies.get(LANG_COOKIE),
        accept_language=request.headers.get("Accept-Language"),
        default=container.settings.default_language,
    )
    return await handler(request)


@web.middleware
async def auth_middleware(request: web.Request, handler):
    request["principal"] = None
    if request.path.startswith(AUTH_PREFIXES):
        token = extract_token(request)
        if token:
            request["principal"] = await get_container(request).auth_service.resolve_principal(token)
    return await handler(request)


@web.middleware
async def request_log_middleware(request: web.Request, handler):
    start = time.monotonic()
    status = 500
    try:
        response = await handler(request)
        status = response.status
        return response
    except web.HTTPException as e:
        status = e.status
        raise
    finally:
        elapsed_ms = (time.monotonic() - start) * 1000
        logger.info(f"[WEB] {request.method} {request.path} -> {status} ({elapsed_ms:.0f}ms)")
