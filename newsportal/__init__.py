"""
NewsPortal - A Flask News Publishing Framework
==============================================

A small news site backed by Supabase:
- Public home page with the latest articles
- Email/password login through Supabase Auth
- Admin panel to publish articles with an uploaded image

Usage:
    from flask import Flask
    from newsportal import NewsPortal

    app = Flask(__name__)
    NewsPortal(app)
"""

__version__ = '0.1.0'

from .extension import NewsPortal

__all__ = ['NewsPortal']
