"""
Shared fixtures for NewsPortal tests
====================================

The Supabase client is replaced by an in-memory fake that mimics the parts
of the supabase-py API the app calls: auth sessions and change events,
table insert/select, and storage upload/public URL.
"""

from types import SimpleNamespace

import pytest
from flask import Flask

from newsportal import NewsPortal


# ---------------------------------------------------------------------------
# Fake Supabase
# ---------------------------------------------------------------------------

def make_session(user_id="u1", email="editor@example.com", role=None, token=None):
    app_metadata = {"provider": "email"}
    if role is not None:
        app_metadata["role"] = role
    user = SimpleNamespace(id=user_id, email=email, app_metadata=app_metadata, user_metadata={})
    return SimpleNamespace(user=user, access_token=token or f"token-{user_id}")


class FakeSubscription:
    def __init__(self, auth, callback):
        self._auth = auth
        self.callback = callback

    def unsubscribe(self):
        if self.callback in self._auth.listeners:
            self._auth.listeners.remove(self.callback)


class FakeAuth:
    def __init__(self):
        self.session = None
        self.listeners = []
        self.accounts = {}
        self.get_session_calls = 0
        self.fail_get_session = False
        self.sign_out_error = None
        self.emit_on_sign_in = True

    def add_account(self, email, password, user_id="u1", role=None):
        self.accounts[email] = (password, user_id, role)

    def get_session(self):
        self.get_session_calls += 1
        if self.fail_get_session:
            raise RuntimeError("network unreachable")
        return self.session

    def on_auth_state_change(self, callback):
        self.listeners.append(callback)
        return FakeSubscription(self, callback)

    def emit(self, event, session):
        for callback in list(self.listeners):
            callback(event, session)

    def sign_in_with_password(self, credentials):
        account = self.accounts.get(credentials["email"])
        if account is None or account[0] != credentials["password"]:
            raise RuntimeError("Invalid login credentials")
        _, user_id, role = account
        self.session = make_session(user_id=user_id, email=credentials["email"], role=role)
        if self.emit_on_sign_in:
            self.emit("SIGNED_IN", self.session)
        return SimpleNamespace(user=self.session.user, session=self.session)

    def sign_out(self):
        if self.sign_out_error:
            raise RuntimeError(self.sign_out_error)
        self.session = None
        self.emit("SIGNED_OUT", None)


class FakeTable:
    def __init__(self):
        self.rows = []
        self.fail_insert = False
        self.fail_select = False


class FakeQuery:
    def __init__(self, table):
        self._table = table
        self._op = None
        self._records = None
        self._order = None
        self._limit = None

    def insert(self, records):
        self._op = "insert"
        self._records = records
        return self

    def select(self, columns="*"):
        self._op = "select"
        return self

    def order(self, column, desc=False):
        self._order = (column, desc)
        return self

    def limit(self, count):
        self._limit = count
        return self

    def execute(self):
        if self._op == "insert":
            if self._table.fail_insert:
                raise RuntimeError("insert rejected by row level security")
            inserted = []
            for record in self._records:
                row = dict(record)
                row.setdefault("id", f"a{len(self._table.rows) + 1}")
                row.setdefault("created_at", f"2024-06-01T00:00:{len(self._table.rows):02d}+00:00")
                self._table.rows.append(row)
                inserted.append(row)
            return SimpleNamespace(data=inserted)

        if self._table.fail_select:
            raise RuntimeError("relation does not exist")
        rows = list(self._table.rows)
        if self._order:
            column, desc = self._order
            rows.sort(key=lambda r: r.get(column) or "", reverse=desc)
        if self._limit is not None:
            rows = rows[: self._limit]
        return SimpleNamespace(data=rows)


class FakeBucket:
    def __init__(self, name):
        self.name = name
        self.objects = {}
        self.fail_upload = False
        self.public_urls = True

    def upload(self, path, file, file_options=None):
        if self.fail_upload:
            raise RuntimeError("Payload too large")
        self.objects[path] = (file, dict(file_options or {}))
        return SimpleNamespace(path=path, full_path=f"{self.name}/{path}")

    def get_public_url(self, path):
        if not self.public_urls:
            return ""
        return f"https://test.supabase.co/storage/v1/object/public/{self.name}/{path}"


class FakeStorage:
    def __init__(self):
        self.buckets = {}

    def from_(self, name):
        return self.buckets.setdefault(name, FakeBucket(name))


class FakeSupabase:
    def __init__(self):
        self.auth = FakeAuth()
        self.storage = FakeStorage()
        self.tables = {}

    def table(self, name):
        return FakeQuery(self.tables.setdefault(name, FakeTable()))

    @property
    def news(self):
        return self.tables.setdefault("news", FakeTable())

    @property
    def images(self):
        return self.storage.from_("news-images")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def supabase():
    return FakeSupabase()


def build_app(supabase=None, **config):
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret"
    app.config["SUPABASE_URL"] = "https://test.supabase.co"
    app.config["SUPABASE_ANON_KEY"] = "anon-test-key"
    app.config["ADMIN_REQUIRED_ROLE"] = None
    app.config.update(config)

    options = {}
    if supabase is not None:
        options["client_factory"] = lambda: supabase
    NewsPortal(app, options)
    return app


@pytest.fixture
def app(supabase):
    """Flask app with every NewsPortal module and the fake Supabase client."""
    return build_app(supabase)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_in(supabase):
    """Sign in an editor by giving the fake auth an existing session."""
    def _sign_in(role="editor", user_id="u1"):
        supabase.auth.session = make_session(user_id=user_id, role=role)
        return supabase.auth.session
    return _sign_in
