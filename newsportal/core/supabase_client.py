"""
Supabase Client
===============

One Supabase client per request. The client's auth session is persisted in
the Flask session cookie, so each visitor carries their own tokens and no
session state is shared between requests.
"""

import logging
from flask import current_app, g, session
from supabase import create_client, Client
from supabase.client import ClientOptions

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = 'sb-'


class FlaskSessionStorage:
    """Token storage for the Supabase auth client, backed by the Flask session."""

    def get_item(self, key):
        return session.get(SESSION_KEY_PREFIX + key)

    def set_item(self, key, value):
        session[SESSION_KEY_PREFIX + key] = value

    def remove_item(self, key):
        session.pop(SESSION_KEY_PREFIX + key, None)


def create_session_client() -> Client:
    """Build a Supabase client bound to the current visitor's session cookie."""
    url = current_app.config.get('SUPABASE_URL')
    key = current_app.config.get('SUPABASE_ANON_KEY')
    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")

    options = ClientOptions(
        storage=FlaskSessionStorage(),
        persist_session=True,
        # no background refresh timer for a request-scoped client
        auto_refresh_token=False,
    )
    return create_client(url, key, options=options)


def is_configured(app=None):
    """True when the Supabase URL and anon key are both present."""
    app = app or current_app
    return bool(app.config.get('SUPABASE_URL') and app.config.get('SUPABASE_ANON_KEY'))


def get_supabase():
    """Get the Supabase client for this request, creating it on first use."""
    if 'supabase' not in g:
        extension = current_app.extensions['newsportal']
        g.supabase = extension.client_factory()
    return g.supabase


def close_supabase(exc=None):
    """Drop this request's client so the next request builds its own."""
    g.pop('supabase', None)
