"""
My NewsPortal Site
==================

Flask app using the NewsPortal framework.

Run with:
    python main.py

Visit:
    http://localhost:5000        - Home feed
    http://localhost:5000/login  - Sign in
    http://localhost:5000/admin  - Publish articles
"""

import logging

from flask import Flask

from config import Config, IS_PRODUCTION

# ===== App Setup =====

app = Flask(__name__)

app.config['SECRET_KEY'] = Config.SECRET_KEY
app.config['SUPABASE_URL'] = Config.SUPABASE_URL
app.config['SUPABASE_ANON_KEY'] = Config.SUPABASE_ANON_KEY
app.config['BRAND_NAME'] = Config.BRAND_NAME
app.config['FEED_LIMIT'] = Config.FEED_LIMIT

# Session security
app.config['SESSION_COOKIE_SECURE'] = IS_PRODUCTION
app.config['SESSION_COOKIE_HTTPONLY'] = True
app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'

logging.basicConfig(
    level=logging.INFO if IS_PRODUCTION else logging.DEBUG,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

# ===== NewsPortal Framework =====

from newsportal import NewsPortal
newsportal = NewsPortal(app)


# ===== Run =====

if __name__ == '__main__':
    logging.getLogger('starter').info("Starting on port 5000...")
    app.run(debug=not IS_PRODUCTION, port=5000, host='0.0.0.0')
