"""
Storage Utility
===============

Image upload to the Supabase Storage bucket that backs article images.
"""

import time
from flask import current_app
from werkzeug.utils import secure_filename

CONTENT_TYPES = {
    'jpg': 'image/jpeg', 'jpeg': 'image/jpeg',
    'png': 'image/png', 'gif': 'image/gif', 'webp': 'image/webp',
}


def _bucket_name(bucket=None):
    return bucket or current_app.config.get('NEWS_IMAGES_BUCKET', 'news-images')


def guess_content_type(filename):
    """Guess content type from extension"""
    ext = filename.rsplit('.', 1)[-1].lower() if '.' in filename else ''
    return CONTENT_TYPES.get(ext, 'application/octet-stream')


def build_object_key(filename, now=None):
    """Unique object key: millisecond timestamp prefixed to the sanitised filename.

    >>> build_object_key('foto playa.jpg', now=1700000000.5)
    '1700000000500_foto_playa.jpg'
    """
    stamp = int((now if now is not None else time.time()) * 1000)
    safe_name = secure_filename(filename or '') or 'imagen'
    return f"{stamp}_{safe_name}"


def upload_file(client, file_bytes, filename, content_type=None, bucket=None):
    """Upload file to the article image bucket.

    Args:
        client: Supabase client for this request.
        file_bytes: Raw bytes of the uploaded file.
        filename: Original filename, used to build the object key.
        content_type: MIME type; guessed from the extension when omitted.
        bucket: Bucket name; defaults to NEWS_IMAGES_BUCKET.

    Returns:
        The object key the file was stored under. Raises on failure.
    """
    key = build_object_key(filename)
    client.storage.from_(_bucket_name(bucket)).upload(
        key,
        file_bytes,
        file_options={'content-type': content_type or guess_content_type(key)},
    )
    return key


def get_public_url(client, key, bucket=None):
    """Public URL of an uploaded object, or an empty string when none is available."""
    url = client.storage.from_(_bucket_name(bucket)).get_public_url(key)
    return url or ''
