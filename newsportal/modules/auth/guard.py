"""
Route Guard
===========

Decides whether a protected view renders, redirects to login, or redirects
home, based only on the request's session store.
"""

import logging
from enum import Enum
from functools import wraps

from flask import redirect, render_template, request

from .roles import Role, satisfies
from .session_store import get_session_store
from ...core.urls import endpoint_url

logger = logging.getLogger(__name__)


class Access(Enum):
    RESOLVING = 'resolving'
    UNAUTHENTICATED = 'unauthenticated'
    FORBIDDEN = 'forbidden'
    AUTHORIZED = 'authorized'


def check_access(user, loading, required_role=None):
    """Map auth state to an access outcome. Never raises.

    An unrecognised ``required_role`` denies everyone.
    """
    if loading:
        return Access.RESOLVING
    if user is None:
        return Access.UNAUTHENTICATED
    try:
        need = Role.parse_requirement(required_role)
    except ValueError as e:
        logger.warning(f"Denying access: {e}")
        return Access.FORBIDDEN
    if satisfies(user.role, need):
        return Access.AUTHORIZED
    return Access.FORBIDDEN


def guard_response(required_role=None):
    """Response for a non-authorized request, or None when the view may render."""
    user, loading = get_session_store().current_user()
    access = check_access(user, loading, required_role)

    if access is Access.AUTHORIZED:
        return None
    if access is Access.RESOLVING:
        return render_template('auth/loading.html')
    if access is Access.UNAUTHENTICATED:
        return redirect(endpoint_url('auth.login', next=request.path))
    return redirect(endpoint_url('news_public.home'))


def role_required(required_role=None):
    """Decorator to require a signed-in user, optionally holding ``required_role``

    Raises ValueError at decoration time for an unknown role.
    """
    required_role = Role.parse_requirement(required_role)

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            response = guard_response(required_role)
            if response is not None:
                return response
            return f(*args, **kwargs)
        return decorated_function
    return decorator
