import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for the NewsPortal framework.
    Supabase credentials come from environment variables; everything else has a default.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Supabase project
    SUPABASE_URL = os.getenv('SUPABASE_URL', '').rstrip('/')
    SUPABASE_ANON_KEY = os.getenv('SUPABASE_ANON_KEY', '')

    # Table and bucket names
    NEWS_TABLE = os.getenv('NEWS_TABLE', 'news')
    NEWS_IMAGES_BUCKET = os.getenv('NEWS_IMAGES_BUCKET', 'news-images')

    # Home feed
    FEED_LIMIT = int(os.getenv('FEED_LIMIT', '3'))

    # Seconds before the admin panel sends the editor home after publishing
    PUBLISH_REDIRECT_DELAY = int(os.getenv('PUBLISH_REDIRECT_DELAY', '1'))

    # Role needed for /admin: unset means any signed-in user, or "editor" / "admin"
    ADMIN_REQUIRED_ROLE = os.getenv('ADMIN_REQUIRED_ROLE') or None

    BRAND_NAME = os.getenv('BRAND_NAME', 'NewsPortal')

    # Port for local server (optional, projects can set this)
    port = int(os.getenv('PORT', '5000'))
