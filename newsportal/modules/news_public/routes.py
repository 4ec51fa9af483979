from flask import render_template, jsonify
from flask_cors import cross_origin

from . import news_public_bp
from ..news.database import get_latest_articles_db
from ...core.logging_service import LoggingService
from ...core.supabase_client import get_supabase


def fetch_feed():
    """Latest articles for the home page; errors are logged and give an empty feed"""
    try:
        return get_latest_articles_db(get_supabase())
    except Exception as e:
        LoggingService.error('feed', 'Error fetching news', {'error': str(e)})
        return []


@news_public_bp.route('/')
def home():
    """Home page: featured article first, the rest as cards"""
    articles = fetch_feed()
    featured = articles[0] if articles else None
    return render_template(
        'news_public/home.html',
        featured=featured,
        secondary=articles[1:],
    )


# API Routes - Public endpoint only
@news_public_bp.route('/api/articles', methods=['GET'])
@cross_origin()
def get_articles():
    """Latest articles API - public endpoint"""
    try:
        articles = get_latest_articles_db(get_supabase())
        return jsonify([article.to_dict() for article in articles])
    except Exception as e:
        LoggingService.error('feed', 'Error fetching news for API', {'error': str(e)})
        return jsonify({'error': 'Could not load articles'}), 502
