"""
Article Publisher
=================

The admin submission flow: check the editor is signed in, validate the
form, upload the image, then insert the article. The insert only happens
once the image has a public URL.
"""

import logging

from ...core.logging_service import LoggingService
from ...core.storage import get_public_url, upload_file
from .database import create_article_db
from .models import ArticleForm

logger = logging.getLogger(__name__)

LOGIN_REQUIRED_MESSAGE = 'Por favor inicia sesión para publicar noticias'
MISSING_FIELDS_MESSAGE = 'Por favor completa todos los campos'
INVALID_CATEGORY_MESSAGE = 'Categoría no válida'
IMAGE_ERROR_MESSAGE = 'Error al subir la imagen'
PUBLISH_ERROR_MESSAGE = 'Error al publicar la noticia'
SUCCESS_MESSAGE = '¡Noticia publicada exitosamente!'


class ImageUploadError(Exception):
    pass


class MissingPublicUrlError(ImageUploadError):
    pass


class ArticleSubmission:
    """State of one admin-panel submission."""

    def __init__(self, client, store):
        self._client = client
        self._store = store
        self.form = ArticleForm()
        self.message = ''
        self.loading = False
        self.published = None

    @property
    def succeeded(self):
        return self.published is not None

    def submit(self, form_data, image):
        """Run the flow. ``image`` is a werkzeug FileStorage or None.

        Returns True when the article was published.
        """
        self.loading = True
        self.message = ''
        self.published = None
        user = None

        try:
            user = self._store.user
            if user is None:
                self.message = LOGIN_REQUIRED_MESSAGE
                return False

            self.form = ArticleForm.from_mapping(form_data)
            if self.form.missing_fields() or image is None or not image.filename:
                self.message = MISSING_FIELDS_MESSAGE
                return False
            if not self.form.has_valid_category():
                self.message = INVALID_CATEGORY_MESSAGE
                return False

            image_url = self._upload_image(image)

            record = self.form.to_record(image_url, user.id)
            self.published = create_article_db(self._client, record) or record

            LoggingService.log_user_action(
                'news', 'publish', user_id=user.id,
                details={'title': self.form.title, 'image_url': image_url},
            )
            self.message = SUCCESS_MESSAGE
            self.form = ArticleForm()
            return True

        except ImageUploadError as e:
            self.message = IMAGE_ERROR_MESSAGE
            LoggingService.log_error_with_traceback('news', e, user_id=user.id if user else None)
            return False
        except Exception as e:
            self.message = PUBLISH_ERROR_MESSAGE
            LoggingService.log_error_with_traceback('news', e, user_id=user.id if user else None)
            return False
        finally:
            self.loading = False

    def _upload_image(self, image):
        try:
            key = upload_file(
                self._client,
                image.read(),
                image.filename,
                content_type=image.mimetype or None,
            )
        except Exception as e:
            raise ImageUploadError(f"Upload failed for {image.filename!r}: {e}") from e

        try:
            image_url = get_public_url(self._client, key)
        except Exception as e:
            raise MissingPublicUrlError(f"Could not resolve public URL for {key!r}: {e}") from e

        if not image_url:
            raise MissingPublicUrlError(f"No public URL for {key!r}")
        return image_url
