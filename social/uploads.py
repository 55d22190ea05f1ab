"""Persist uploaded images through Django's configured file storage."""

import logging
import os
import uuid

from django.core.files.storage import default_storage

logger = logging.getLogger(__name__)


def store_upload(upload, folder):
    """Save `upload` under `folder` with a random name and return its public URL."""
    _, extension = os.path.splitext(getattr(upload, "name", "") or "")
    file_name = f"{uuid.uuid4().hex}{extension.lower()}"
    stored_name = default_storage.save(f"{folder}/{file_name}", upload)
    logger.debug("Stored upload %s", stored_name)
    return default_storage.url(stored_name)
