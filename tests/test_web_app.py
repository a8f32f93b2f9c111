import pytest
import pytest_asyncio
from aiohttp.test_utils import TestClient, TestServer

from adapters.web import create_app
from core.domain.constants import ACCESS_TOKEN_COOKIE, ADMINS_TABLE, FAQS_TABLE, MEMBERS_TABLE


@pytest_asyncio.fixture
async def client(container):
    async with TestClient(TestServer(create_app(container))) as client:
        yield client


@pytest.fixture
def admin_headers(identity, fake_db):
    user = identity.add_user("founder@example.com")
    fake_db.seed(ADMINS_TABLE, {"id": user.id, "email": user.email, "is_active": True})
    return {"Authorization": f"Bearer {identity.token_for(user)}"}


@pytest.fixture
def player_headers(identity):
    user = identity.add_user("player@example.com")
    return {"Authorization": f"Bearer {identity.token_for(user)}"}


FAQ = {
    "question_it": "Come entro nel team?",
    "question_en": "How do I join the team?",
    "answer_it": "Scrivici su **Discord**",
    "answer_en": "Message us on **Discord**",
}


# === PUBLIC ===

async def test_health(client):
    resp = await client.get("/health")
    assert resp.status == 200
    assert await resp.json() == {"status": "ok", "realtime": False}


async def test_public_members(client, fake_db):
    fake_db.seed(MEMBERS_TABLE, {"name": "Empo", "image": "", "achievements": ["OST x1"]})
    resp = await client.get("/api/members")
    assert resp.status == 200
    [member] = await resp.json()
    assert member["name"] == "Empo"
    assert member["image"] == "/placeholder.svg"


async def test_public_faqs_language(client, container):
    await container.faq_service.create_faq(FAQ)

    resp = await client.get("/api/faqs?lang=en")
    assert (await resp.json())[0]["question"] == "How do I join the team?"

    resp = await client.get("/api/faqs")
    assert (await resp.json())[0]["question"] == "Come entro nel team?"

    resp = await client.get("/api/faqs", headers={"Accept-Language": "en-US,en;q=0.9"})
    assert (await resp.json())[0]["question"] == "How do I join the team?"


async def test_public_footer_grouped(client, container):
    resource = await container.footer_service.create_resource(
        {"title_it": "Regole", "title_en": "Rules", "url": "/rules", "category": "links"}
    )
    resp = await client.get("/api/footer?lang=en")
    assert await resp.json() == {
        "links": [{"id": resource.id, "title": "Rules", "url": "/rules", "icon": None}],
    }


async def test_backend_failure_is_500(client, fake_db):
    fake_db.failing_tables.add(MEMBERS_TABLE)
    resp = await client.get("/api/members?lang=en")
    assert resp.status == 500
    assert await resp.json() == {"error": "Something went wrong"}


# === AUTH ===

async def test_sign_in_sets_cookie_and_me_uses_it(client, identity):
    identity.add_user("player@example.com", "secret123")

    resp = await client.post("/api/auth/sign-in", json={"email": "player@example.com", "password": "secret123"})
    assert resp.status == 200
    body = await resp.json()
    assert body["user"]["email"] == "player@example.com"
    assert body["user"]["is_admin"] is False
    assert ACCESS_TOKEN_COOKIE in resp.cookies
    assert resp.cookies[ACCESS_TOKEN_COOKIE]["httponly"]

    resp = await client.get("/api/auth/me")
    assert resp.status == 200
    assert (await resp.json())["email"] == "player@example.com"


async def test_sign_in_failures(client, identity):
    identity.add_user("player@example.com", "secret123")

    resp = await client.post("/api/auth/sign-in?lang=en", json={"email": "player@example.com", "password": "nope"})
    assert resp.status == 401
    assert await resp.json() == {"error": "Authentication error"}

    resp = await client.post("/api/auth/sign-in", json={"email": "", "password": ""})
    assert resp.status == 400
    assert await resp.json() == {"error": "Per favore inserisci email e password"}


async def test_invalid_json_body(client):
    resp = await client.post("/api/auth/sign-in", data="not json", headers={"Content-Type": "application/json"})
    assert resp.status == 400


async def test_non_string_credentials_are_rejected(client):
    resp = await client.post("/api/auth/sign-in", json={"email": 5, "password": "secret123"})
    assert resp.status == 400
    assert (await resp.json())["error"] == "Dati non validi"

    resp = await client.post("/api/auth/sign-up", json={"email": "player@example.com", "password": ["secret123"]})
    assert resp.status == 400


async def test_sign_out_clears_session(client, player_headers):
    resp = await client.post("/api/auth/sign-out", headers=player_headers)
    assert resp.status == 200

    resp = await client.get("/api/auth/me", headers=player_headers)
    assert resp.status == 401


async def test_me_requires_session(client):
    resp = await client.get("/api/auth/me")
    assert resp.status == 401


# === ADMIN CONTENT ===

async def test_admin_routes_are_guarded(client, player_headers):
    resp = await client.get("/api/admin/members")
    assert resp.status == 401

    resp = await client.get("/api/admin/members?lang=en", headers=player_headers)
    assert resp.status == 403
    assert "admin permissions" in (await resp.json())["error"]


async def test_admin_member_crud(client, admin_headers):
    resp = await client.post(
        "/api/admin/members",
        json={"name": "Empo", "role": "GEN 9 OU", "achievements": "OST x1\nSPL x2"},
        headers=admin_headers,
    )
    assert resp.status == 201
    member = (await resp.json())["item"]
    assert member["achievements"] == ["OST x1", "SPL x2"]

    resp = await client.put(f"/api/admin/members/{member['id']}", json={"role": "GEN 8 OU"}, headers=admin_headers)
    assert resp.status == 200
    assert (await resp.json())["item"]["role"] == "GEN 8 OU"

    resp = await client.get("/api/admin/members", headers=admin_headers)
    assert [m["name"] for m in await resp.json()] == ["Empo"]

    resp = await client.delete(f"/api/admin/members/{member['id']}", headers=admin_headers)
    assert resp.status == 200

    resp = await client.delete(f"/api/admin/members/{member['id']}", headers=admin_headers)
    assert resp.status == 404


async def test_admin_validation_error(client, admin_headers):
    resp = await client.post("/api/admin/best-games", json={"tournament": "SPL"}, headers=admin_headers)
    assert resp.status == 400
    body = await resp.json()
    assert body["error"] == "Dati non validi"
    assert {d["loc"][0] for d in body["details"]} == {"players", "replay_url"}


async def test_admin_update_missing(client, admin_headers):
    resp = await client.put("/api/admin/faqs/missing", json={"answer_en": "x"}, headers=admin_headers)
    assert resp.status == 404


@pytest.mark.parametrize("path, body, null_field", [
    ("/api/admin/members", {"name": "Empo"}, "name"),
    ("/api/admin/best-games", {"tournament": "SPL", "players": "Empo vs Raiza", "replay_url": "https://replay.pokemonshowdown.com/1"}, "replay_url"),
    ("/api/admin/faqs", FAQ, "is_active"),
    ("/api/admin/footer", {"title_it": "Discord", "title_en": "Discord", "url": "https://discord.gg/x", "category": "social"}, "position"),
])
async def test_admin_update_with_null_is_rejected(client, admin_headers, path, body, null_field):
    resp = await client.post(path, json=body, headers=admin_headers)
    assert resp.status == 201
    item = (await resp.json())["item"]

    resp = await client.put(f"{path}/{item['id']}", json={null_field: None}, headers=admin_headers)
    assert resp.status == 400
    assert (await resp.json())["error"] == "Dati non validi"

    resp = await client.get(path, headers=admin_headers)
    assert resp.status == 200
    assert await resp.json() == [item]


async def test_admin_faq_toggle_updates_public_list(client, admin_headers):
    resp = await client.post("/api/admin/faqs", json=FAQ, headers=admin_headers)
    faq_id = (await resp.json())["item"]["id"]
    assert len(await (await client.get("/api/faqs")).json()) == 1

    resp = await client.post(f"/api/admin/faqs/{faq_id}/toggle?lang=en", headers=admin_headers)
    assert resp.status == 200
    body = await resp.json()
    assert body["item"]["is_active"] is False
    assert body["message"] == "FAQ deactivated successfully"

    assert await (await client.get("/api/faqs")).json() == []


async def test_admin_footer_toggle_missing(client, admin_headers):
    resp = await client.post("/api/admin/footer/missing/toggle", headers=admin_headers)
    assert resp.status == 404


# === ADMIN USERS ===

async def test_bootstrap_first_admin(client, identity, fake_db):
    identity.add_user("founder@example.com", "secret123")
    resp = await client.post("/api/auth/sign-in", json={"email": "founder@example.com", "password": "secret123"})
    assert (await resp.json())["user"]["is_admin"] is False

    resp = await client.post("/api/admin/bootstrap")
    assert resp.status == 200

    resp = await client.get("/api/auth/me")
    assert (await resp.json())["is_admin"] is True

    resp = await client.post("/api/admin/bootstrap")
    assert resp.status == 409


async def test_bootstrap_requires_session(client):
    resp = await client.post("/api/admin/bootstrap")
    assert resp.status == 401


async def test_users_tab_and_toggle(client, identity, admin_headers):
    player = identity.add_user("player@example.com")

    resp = await client.get("/api/admin/users", headers=admin_headers)
    users = {u["email"]: u for u in await resp.json()}
    assert users["founder@example.com"]["is_first_admin"] is True
    assert users["player@example.com"]["is_admin"] is False

    resp = await client.post(
        f"/api/admin/users/{player.id}/toggle?lang=en",
        json={"email": player.email, "is_admin": False},
        headers=admin_headers,
    )
    assert resp.status == 200
    assert (await resp.json())["message"] == "player@example.com is now an administrator"


async def test_admin_cannot_toggle_self(client, identity, admin_headers):
    founder = identity.users["founder@example.com"]["user"]
    resp = await client.post(f"/api/admin/users/{founder.id}/toggle?lang=en", headers=admin_headers)
    assert resp.status == 400
    assert await resp.json() == {"error": "You cannot change your own admin permissions"}


async def test_toggle_with_non_string_email_is_rejected(client, identity, admin_headers):
    player = identity.add_user("player@example.com")
    resp = await client.post(f"/api/admin/users/{player.id}/toggle", json={"email": 5}, headers=admin_headers)
    assert resp.status == 400
    assert (await resp.json())["error"] == "Dati non validi"


# === STATS ===

async def test_stats_requires_token(client):
    resp = await client.get("/stats?token=wrong")
    assert resp.status == 401


async def test_stats_page(client, container, fake_db):
    fake_db.seed(FAQS_TABLE, {"question_it": "a", "is_active": True, "position": 0})
    resp = await client.get("/stats?token=stats-secret")
    assert resp.status == 200
    text = await resp.text()
    assert "Community Content Dashboard" in text
    assert "Content Cache" in text
