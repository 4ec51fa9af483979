from flask import flash, render_template, request, redirect

from . import auth_bp
from .session_store import get_session_store
from ...core.logging_service import LoggingService
from ...core.urls import endpoint_url

MISSING_CREDENTIALS_MESSAGE = 'Por favor ingresa correo y contraseña'
INVALID_CREDENTIALS_MESSAGE = 'Correo o contraseña incorrectos'
SIGNED_OUT_MESSAGE = 'Has cerrado sesión'


def _safe_next(target):
    """Only follow local paths after sign-in"""
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return endpoint_url('news_admin.admin_panel')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Login page and email/password sign-in"""
    store = get_session_store()
    next_page = request.values.get('next', '')

    if request.method == 'GET':
        if store.user is not None:
            return redirect(_safe_next(next_page))
        return render_template('auth/login.html', next=next_page)

    email = request.form.get('email', '').strip().lower()
    password = request.form.get('password', '')

    if not email or not password:
        flash(MISSING_CREDENTIALS_MESSAGE, 'error')
        return render_template('auth/login.html', next=next_page, email=email), 400

    result = store.sign_in(email, password)
    if result.error:
        LoggingService.log_security_event(
            'Failed sign-in attempt', {'email': email, 'error': result.error}
        )
        flash(INVALID_CREDENTIALS_MESSAGE, 'error')
        return render_template('auth/login.html', next=next_page, email=email), 401

    user_id = store.user.id if store.user is not None else None
    LoggingService.log_user_action('auth', 'login', user_id=user_id)
    return redirect(_safe_next(next_page))


@auth_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Sign out and return to the home page"""
    store = get_session_store()
    user_id = store.user.id if store.user is not None else None

    error = store.sign_out()
    if error:
        LoggingService.error('auth', 'Sign-out failed', {'error': error}, user_id=user_id)
    else:
        LoggingService.log_user_action('auth', 'logout', user_id=user_id)
        flash(SIGNED_OUT_MESSAGE, 'info')

    return redirect(endpoint_url('news_public.home'))
