"""
Public read endpoints for the site sections (members, best games, FAQ, footer).
"""

from aiohttp import web

from adapters.web.utils import get_container, get_lang

routes = web.RouteTableDef()


@routes.get("/health")
async def health(request: web.Request) -> web.Response:
    container = get_container(request)
    listener = container.listener
    return web.json_response({
        "status": "ok",
        "realtime": bool(listener and listener.running),
    })


@routes.get("/api/members")
async def members(request: web.Request) -> web.Response:
    data = await get_container(request).member_service.public_members()
    return web.json_response(data)


@routes.get("/api/best-games")
async def best_games(request: web.Request) -> web.Response:
    data = await get_container(request).game_service.public_games(get_lang(request))
    return web.json_response(data)


@routes.get("/api/faqs")
async def faqs(request: web.Request) -> web.Response:
    data = await get_container(request).faq_service.public_faqs(get_lang(request))
    return web.json_response(data)


@routes.get("/api/footer")
async def footer(request: web.Request) -> web.Response:
    data = await get_container(request).footer_service.grouped_resources(get_lang(request))
    return web.json_response(data)
