"""
Session Store
=============

Read-only view of the Supabase auth session for one consumer.

The store fetches the existing session once on ``start()`` and then keeps
its cached user in sync through a single ``on_auth_state_change``
subscription. Sign-in and sign-out go through the provider only; the cache
changes when the provider reports the new session back through that
subscription. ``stop()`` releases the subscription.

In the web app one store lives per request, see ``get_session_store()``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional, Tuple

from flask import g

from ...core.supabase_client import get_supabase
from .roles import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    id: str
    email: Optional[str]
    access_token: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    role: Optional[Role] = None

    @classmethod
    def from_session(cls, session) -> Optional['User']:
        """Project a provider session onto a User; None when there is no user."""
        provider_user = getattr(session, 'user', None) if session is not None else None
        if provider_user is None:
            return None
        metadata = dict(getattr(provider_user, 'app_metadata', None) or {})
        return cls(
            id=str(provider_user.id),
            email=getattr(provider_user, 'email', None),
            access_token=getattr(session, 'access_token', None),
            metadata=metadata,
            role=Role.decode(metadata.get('role')),
        )


class AuthResult(NamedTuple):
    data: Any
    error: Optional[str]


class SessionStore:
    """Cached current user plus the subscription that keeps it fresh."""

    def __init__(self, auth):
        self._auth = auth
        self._user: Optional[User] = None
        self._loading = True
        self._subscription = None
        self._active = False

    # ----- lifecycle -----

    def start(self):
        """Resolve the initial session and subscribe to changes (once)."""
        if self._active:
            return self
        self._active = True

        try:
            session = self._auth.get_session()
            self._user = User.from_session(session)
        except Exception as e:
            logger.warning(f"Could not resolve session, treating as signed out: {e}")
            self._user = None
        finally:
            self._loading = False

        self._subscription = self._auth.on_auth_state_change(self._on_auth_change)
        return self

    def stop(self):
        """Release the subscription; later emissions are ignored."""
        self._active = False
        subscription, self._subscription = self._subscription, None
        if subscription is not None:
            try:
                subscription.unsubscribe()
            except Exception as e:
                logger.warning(f"Failed to unsubscribe from auth changes: {e}")

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False

    def _on_auth_change(self, event, session):
        if not self._active:
            return
        self._user = User.from_session(session)
        self._loading = False
        logger.debug(f"Auth state changed: {event}")

    # ----- reads -----

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def active(self) -> bool:
        return self._active

    def current_user(self) -> Tuple[Optional[User], bool]:
        return self._user, self._loading

    def role(self) -> Optional[Role]:
        return self._user.role if self._user is not None else None

    # ----- provider calls -----

    def sign_in(self, email, password) -> AuthResult:
        try:
            response = self._auth.sign_in_with_password({'email': email, 'password': password})
            return AuthResult(response, None)
        except Exception as e:
            return AuthResult(None, str(e) or type(e).__name__)

    def sign_out(self) -> Optional[str]:
        try:
            self._auth.sign_out()
            return None
        except Exception as e:
            return str(e) or type(e).__name__


def get_session_store() -> SessionStore:
    """Session store for the current request, started on first use.

    Released by ``close_session_store`` at app-context teardown.
    """
    if 'session_store' not in g:
        try:
            auth = get_supabase().auth
        except Exception as e:
            logger.warning(f"Supabase client unavailable, treating as signed out: {e}")
            auth = _UnavailableAuth(e)
        g.session_store = SessionStore(auth).start()
    return g.session_store


def close_session_store(exc=None):
    store = g.pop('session_store', None)
    if store is not None:
        store.stop()


class _UnavailableAuth:
    """Auth stand-in used when no client could be built for this request."""

    def __init__(self, error):
        self._error = error

    def get_session(self):
        return None

    def on_auth_state_change(self, callback):
        return None

    def sign_in_with_password(self, credentials):
        raise RuntimeError(f"Authentication backend unavailable: {self._error}")

    def sign_out(self):
        raise RuntimeError(f"Authentication backend unavailable: {self._error}")
