"""
News Admin Routes
=================

The /admin panel: article form on GET, submission flow on POST.
"""

from flask import current_app, render_template, request

from . import news_bp
from .models import Category
from .publisher import (
    INVALID_CATEGORY_MESSAGE,
    LOGIN_REQUIRED_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    ArticleSubmission,
)
from ..auth.guard import guard_response
from ..auth.session_store import get_session_store
from ...core.supabase_client import get_supabase

# Image and insert failures fall through to 502
FAILURE_STATUS = {
    LOGIN_REQUIRED_MESSAGE: 401,
    MISSING_FIELDS_MESSAGE: 400,
    INVALID_CATEGORY_MESSAGE: 400,
}


@news_bp.before_request
def require_editor():
    """Every admin page goes through the route guard"""
    return guard_response(current_app.config.get('ADMIN_REQUIRED_ROLE'))


def _render_panel(submission, status=200):
    return render_template(
        'news/admin_panel.html',
        submission=submission,
        categories=Category.choices(),
        redirect_delay=current_app.config.get('PUBLISH_REDIRECT_DELAY', 1),
    ), status


@news_bp.route('', methods=['GET'])
def admin_panel():
    """Article creation form"""
    submission = ArticleSubmission(None, get_session_store())
    return _render_panel(submission)


@news_bp.route('', methods=['POST'])
def publish_article():
    """Publish a new article with its image"""
    store = get_session_store()
    submission = ArticleSubmission(get_supabase(), store)
    if submission.submit(request.form, request.files.get('image')):
        return _render_panel(submission, 201)
    return _render_panel(submission, FAILURE_STATUS.get(submission.message, 502))
