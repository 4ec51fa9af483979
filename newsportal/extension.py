"""
NewsPortal Flask extension
==========================

Wires config, blueprints, template context and per-request teardown onto a
Flask app:

    app = Flask(__name__)
    NewsPortal(app, {'brand_name': 'Mi Portal'})
"""

import logging
import time

from .core.config import Config
from .core.supabase_client import close_supabase, create_session_client
from .core.urls import endpoint_url

logger = logging.getLogger(__name__)

DEFAULT_FEATURES = {
    'auth': True,
    'news': True,
    'news_public': True,
    'ops': True,
}

CONFIG_KEYS = [
    'SUPABASE_URL',
    'SUPABASE_ANON_KEY',
    'NEWS_TABLE',
    'NEWS_IMAGES_BUCKET',
    'FEED_LIMIT',
    'PUBLISH_REDIRECT_DELAY',
    'ADMIN_REQUIRED_ROLE',
    'BRAND_NAME',
]


class NewsPortal:
    def __init__(self, app=None, config=None):
        self._config = dict(config or {})
        self._registered = []
        self._app_brand_name = None
        self.client_factory = self._config.get('client_factory') or create_session_client
        self.started_at = time.time()
        if app is not None:
            self.init_app(app)

    @property
    def features(self):
        features = dict(DEFAULT_FEATURES)
        features.update(self._config.get('features') or {})
        return features

    @property
    def brand_name(self):
        return self._config.get('brand_name') or self._app_brand_name or Config.BRAND_NAME

    def init_app(self, app):
        for key in CONFIG_KEYS:
            app.config.setdefault(key, getattr(Config, key))
        if not app.config.get('SECRET_KEY'):
            if Config.SECRET_KEY:
                app.config['SECRET_KEY'] = Config.SECRET_KEY
            else:
                logger.warning("No SECRET_KEY configured; sign-in sessions will not persist")
        self._app_brand_name = app.config.get('BRAND_NAME')

        from .modules.auth.roles import Role
        # an unknown required role is a startup error
        Role.parse_requirement(app.config.get('ADMIN_REQUIRED_ROLE') or None)

        self._register_modules(app)

        from .modules.auth.session_store import close_session_store
        # released per request; one app context may span several requests
        app.teardown_request(close_session_store)
        app.teardown_request(close_supabase)
        app.teardown_appcontext(close_session_store)
        app.context_processor(self._template_context)
        app.add_template_global(endpoint_url)

        app.extensions['newsportal'] = self

    def _register_modules(self, app):
        features = self.features

        if features.get('auth'):
            from .modules.auth import auth_bp
            app.register_blueprint(auth_bp)
            self._registered.append('auth')

        if features.get('news'):
            from .modules.news import news_bp
            app.register_blueprint(news_bp)
            self._registered.append('news')

        if features.get('news_public'):
            from .modules.news_public import news_public_bp
            app.register_blueprint(news_public_bp)
            self._registered.append('news_public')

        if features.get('ops'):
            from .modules.ops import ops_health_bp
            app.register_blueprint(ops_health_bp)
            self._registered.append('ops')

    def get_registered_modules(self):
        return list(self._registered)

    def _template_context(self):
        from .modules.auth.session_store import get_session_store
        from .modules.news.models import CATEGORY_MENU

        store = get_session_store()
        return {
            'newsportal_config': {
                'brand_name': self.brand_name,
                'features': self.features,
            },
            'brand_name': self.brand_name,
            'category_menu': CATEGORY_MENU,
            'current_user': store.user,
            'user_role': store.role(),
        }
