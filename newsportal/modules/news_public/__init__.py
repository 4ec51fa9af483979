from flask import Blueprint

news_public_bp = Blueprint(
    'news_public',
    __name__,
    template_folder='templates',
    static_folder='static',
    static_url_path='/news_public/static'
)

from . import routes

__all__ = ['news_public_bp']
