"""
NewsPortal Modules
==================

Flask blueprint modules registered by the NewsPortal extension.
"""

__all__ = ['auth', 'news', 'news_public', 'ops']
