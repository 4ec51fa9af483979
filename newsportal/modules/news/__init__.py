"""
News Admin Module
=================

Admin panel where signed-in editors publish articles.

Provides:
- Article creation form
- Image upload to Supabase Storage
- Guarded access (ADMIN_REQUIRED_ROLE)
"""

from flask import Blueprint

news_bp = Blueprint(
    'news_admin',
    __name__,
    url_prefix='/admin',
    template_folder='templates',
)

from . import routes

__all__ = ['news_bp']
