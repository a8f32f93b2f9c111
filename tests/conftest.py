"""
Shared fixtures: an in-memory stand-in for the Supabase table API, a fake
identity provider and a fully wired container.
"""

import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest
from postgrest.exceptions import APIError

from adapters.web.loader import build_container
from config.features import Features
from config.settings import Settings
from core.domain.models import RegisteredUser
from core.interfaces.repositories import IIdentityService


# === FAKE SUPABASE ===

class FakeResponse:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


def _sort_key(value):
    return (value is None, value if value is not None else "")


class FakeQuery:
    """Covers the builder calls the repositories make"""

    def __init__(self, db: "FakeSupabase", table: str):
        self._db = db
        self._table = table
        self._op = "select"
        self._payload = None
        self._filters = []
        self._orders = []
        self._limit = None
        self._count = None

    def select(self, *columns, count=None):
        self._op = "select"
        self._count = count
        return self

    def insert(self, data):
        self._op = "insert"
        self._payload = data
        return self

    def update(self, fields):
        self._op = "update"
        self._payload = fields
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self._orders.append((column, desc))
        return self

    def limit(self, n):
        self._limit = n
        return self

    def _matches(self, row: dict) -> bool:
        return all(row.get(col) == val for col, val in self._filters)

    def execute(self) -> FakeResponse:
        self._db.calls.append((self._table, self._op))
        if self._table in self._db.failing_tables:
            raise APIError({"message": f"relation {self._table} unavailable", "code": "500"})

        rows = self._db.tables.setdefault(self._table, [])

        if self._op == "insert":
            payload = self._payload if isinstance(self._payload, list) else [self._payload]
            inserted = []
            for item in payload:
                row = copy.deepcopy(item)
                row.setdefault("id", str(uuid.uuid4()))
                row.setdefault("created_at", self._db.next_timestamp())
                rows.append(row)
                inserted.append(copy.deepcopy(row))
            return FakeResponse(inserted)

        if self._op == "update":
            updated = []
            for row in rows:
                if self._matches(row):
                    row.update(copy.deepcopy(self._payload))
                    updated.append(copy.deepcopy(row))
            return FakeResponse(updated)

        if self._op == "delete":
            deleted = [row for row in rows if self._matches(row)]
            self._db.tables[self._table] = [row for row in rows if not self._matches(row)]
            return FakeResponse(copy.deepcopy(deleted))

        selected = [copy.deepcopy(row) for row in rows if self._matches(row)]
        for column, desc in reversed(self._orders):
            selected.sort(key=lambda r: _sort_key(r.get(column)), reverse=desc)
        count = len(selected) if self._count else None
        if self._limit is not None:
            selected = selected[:self._limit]
        return FakeResponse(selected, count=count)


class FakeSupabase:
    """Minimal sync client: table(name) -> builder -> execute()"""

    def __init__(self):
        self.tables: Dict[str, List[dict]] = {}
        self.calls = []
        self.failing_tables = set()
        self._tick = 0

    def next_timestamp(self) -> str:
        self._tick += 1
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        return (base + timedelta(seconds=self._tick)).isoformat()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, table: str, *rows: dict) -> List[dict]:
        return self.table(table).insert(list(rows)).execute().data

    def reads(self, table: str) -> int:
        return sum(1 for t, op in self.calls if t == table and op == "select")


# === FAKE IDENTITY ===

class FakeIdentity(IIdentityService):
    """Accounts keyed by email, tokens are "token-<user id>" """

    def __init__(self, confirm_email: bool = False, admin_api: bool = True):
        self.confirm_email = confirm_email
        self.admin_api = admin_api
        self.users: Dict[str, dict] = {}
        self.signed_out: List[str] = []

    def add_user(self, email: str, password: str = "secret123", user_id: Optional[str] = None) -> RegisteredUser:
        user = RegisteredUser(
            id=user_id or str(uuid.uuid4()),
            email=email,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=len(self.users)),
        )
        self.users[email] = {"user": user, "password": password}
        return user

    @staticmethod
    def token_for(user: RegisteredUser) -> str:
        return f"token-{user.id}"

    def _session(self, user: RegisteredUser) -> dict:
        return {"user": user, "access_token": self.token_for(user), "refresh_token": f"refresh-{user.id}"}

    async def sign_up(self, email: str, password: str) -> dict:
        if email in self.users:
            raise ValueError("User already registered")
        if len(password) < 6:
            raise ValueError("Password should be at least 6 characters")
        user = self.add_user(email, password)
        if self.confirm_email:
            return {"user": user, "access_token": None, "refresh_token": None}
        return self._session(user)

    async def sign_in(self, email: str, password: str) -> dict:
        entry = self.users.get(email)
        if not entry or entry["password"] != password:
            raise ValueError("Invalid login credentials")
        return self._session(entry["user"])

    async def sign_out(self, access_token: str) -> None:
        self.signed_out.append(access_token)

    async def get_user(self, access_token: str) -> Optional[RegisteredUser]:
        for entry in self.users.values():
            if self.token_for(entry["user"]) == access_token and access_token not in self.signed_out:
                return entry["user"]
        return None

    async def list_users(self) -> List[RegisteredUser]:
        if not self.admin_api:
            raise ValueError("User not allowed")
        return [entry["user"] for entry in self.users.values()]


# === FIXTURES ===

class _TestFeatures(Features):
    REALTIME_ENABLED = False
    CONTENT_CACHE_TTL = 300
    PUBLIC_MEMBERS_LIMIT = 30
    ADMIN_BOOTSTRAP_ENABLED = True
    DEBUG_MODE = False
    LOG_REQUESTS = False


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def identity() -> FakeIdentity:
    return FakeIdentity()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        supabase_url="http://localhost:54321",
        supabase_key="anon",
        stats_token="stats-secret",
        cookie_secure=False,
        admin_emails="owner@example.com",
    )


@pytest.fixture
def test_features() -> Features:
    return _TestFeatures()


@pytest.fixture
def container(test_settings, test_features, fake_db, identity):
    return build_container(test_settings, test_features, client=fake_db, identity=identity)
