"""
URL helpers
===========

Cross-module links that survive a module being switched off through the
``features`` option.
"""

from flask import current_app, url_for


def endpoint_url(endpoint, **values):
    """``url_for(endpoint)``, or ``'/'`` when that endpoint is not registered"""
    if endpoint not in current_app.view_functions:
        return '/'
    return url_for(endpoint, **values)
