"""
News Database Helpers
=====================

Reads and writes against the Supabase ``news`` table.
"""

from flask import current_app

from .models import Article


def get_news_table():
    """Get the news table name from app config"""
    return current_app.config.get('NEWS_TABLE', 'news')


def create_article_db(client, record):
    """Insert one article row and return what the backend echoed back"""
    response = client.table(get_news_table()).insert([record]).execute()
    rows = getattr(response, 'data', None) or []
    return rows[0] if rows else {}


def get_latest_articles_db(client, limit=None):
    """Most recent articles, newest first"""
    if limit is None:
        limit = current_app.config.get('FEED_LIMIT', 3)

    response = (
        client.table(get_news_table())
        .select('*')
        .order('created_at', desc=True)
        .limit(limit)
        .execute()
    )
    return [Article.from_row(row) for row in (response.data or [])]
