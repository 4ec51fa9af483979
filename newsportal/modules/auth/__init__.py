"""
NewsPortal Auth Module

Provides user authentication on top of Supabase Auth:
- Email/password sign-in and sign-out
- Per-request session store with a typed role claim
- Route guard decorators for protected pages
"""

from flask import Blueprint

auth_bp = Blueprint(
    'auth',
    __name__,
    template_folder='templates',
)

from . import routes
from .guard import Access, check_access, guard_response, role_required
from .roles import Role, satisfies
from .session_store import (
    AuthResult,
    SessionStore,
    User,
    close_session_store,
    get_session_store,
)

__all__ = [
    'auth_bp', 'Access', 'check_access', 'guard_response', 'role_required',
    'Role', 'satisfies', 'AuthResult', 'SessionStore', 'User',
    'close_session_store', 'get_session_store',
]
