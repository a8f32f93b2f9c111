"""
Stats web dashboard - content counts and cache health.
Access: GET /stats?token=SECRET
"""

import html
import logging
from datetime import datetime, timezone

from aiohttp import web
from postgrest.exceptions import APIError

from adapters.web.utils import get_container

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


@routes.get("/stats")
async def handle_stats(request: web.Request) -> web.Response:
    container = get_container(request)
    stats_token = container.settings.stats_token
    token = request.query.get("token", "")
    if not stats_token or token != stats_token:
        return web.Response(text="Unauthorized", status=401)

    try:
        members = await container.member_service.list_members()
        games = await container.game_service.list_games()
        faqs = await container.faq_service.list_faqs()
        resources = await container.footer_service.list_resources()
        admins = await container.admin_service.list_admins()
    except APIError as e:
        logger.error(f"Stats query failed: {e.message}")
        return web.Response(text="DB error", status=500)

    active_faqs = sum(1 for f in faqs if f.is_active)
    active_admins = sum(1 for a in admins if a.is_active)

    # Footer breakdown
    categories: dict = {}
    for r in resources:
        if r.category not in categories:
            categories[r.category] = {"total": 0, "active": 0}
        categories[r.category]["total"] += 1
        if r.is_active:
            categories[r.category]["active"] += 1

    category_rows = ""
    for category, data in sorted(categories.items(), key=lambda x: x[1]["total"], reverse=True):
        category_rows += (
            f'<tr><td>{html.escape(category)}</td>'
            f'<td>{data["total"]}</td>'
            f'<td>{data["active"]}</td></tr>\n'
        )

    cache = container.cache.stats()
    lookups = cache["hits"] + cache["misses"]
    hit_pct = round(cache["hits"] / lookups * 100) if lookups else 0

    listener = container.listener
    realtime_status = "on" if listener and listener.running else "off"
    realtime_events = listener.events_received if listener else 0

    now = datetime.now(timezone.utc)

    page = f"""<!DOCTYPE html>
<html><head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<meta http-equiv="refresh" content="30">
<title>Community Stats</title>
<style>
  body {{ font-family: -apple-system, BlinkMacSystemFont, sans-serif; max-width: 600px; margin: 0 auto; padding: 16px; background: #0d1117; color: #e6edf3; }}
  h1 {{ font-size: 1.4em; border-bottom: 1px solid #30363d; padding-bottom: 8px; }}
  .card {{ background: #161b22; border: 1px solid #30363d; border-radius: 8px; padding: 16px; margin-bottom: 12px; }}
  .big {{ font-size: 2em; font-weight: bold; color: #58a6ff; }}
  .row {{ display: flex; justify-content: space-between; margin: 4px 0; }}
  .label {{ color: #8b949e; }}
  table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
  th, td {{ text-align: left; padding: 6px 8px; border-bottom: 1px solid #21262d; }}
  th {{ color: #8b949e; font-weight: normal; }}
  .muted {{ color: #8b949e; font-size: 0.85em; }}
</style>
</head><body>
<h1>Community Content Dashboard</h1>

<div class="card">
  <div class="big">{len(members)}</div>
  <div class="label">Members</div>
  <div class="row"><span>Best games</span><span>{len(games)}</span></div>
  <div class="row"><span>FAQs (active)</span><span>{len(faqs)} ({active_faqs})</span></div>
  <div class="row"><span>Admins (active)</span><span>{len(admins)} ({active_admins})</span></div>
</div>

<div class="card">
  <div class="label">Footer Resources</div>
  <table>
    <tr><th>Category</th><th>Total</th><th>Active</th></tr>
    {category_rows}
  </table>
</div>

<div class="card">
  <div class="label">Content Cache</div>
  <div class="row"><span>Entries</span><span>{cache["entries"]}</span></div>
  <div class="row"><span>Hit rate</span><span>{cache["hits"]}/{lookups} ({hit_pct}%)</span></div>
  <div class="row"><span>Invalidations</span><span>{cache["invalidations"]}</span></div>
  <div class="row"><span>TTL</span><span>{cache["ttl_seconds"]}s</span></div>
  <div class="row"><span>Realtime</span><span>{realtime_status} &middot; {realtime_events} events</span></div>
</div>

<p class="muted">Auto-refreshes every 30s &middot; {now.strftime('%Y-%m-%d %H:%M UTC')}</p>
</body></html>"""

    return web.Response(text=page, content_type="text/html")
