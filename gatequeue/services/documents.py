"""Delivery-order document references.

The capture component sends either an inline ``data:`` URL (an already
compressed JPEG) or a URL it uploaded elsewhere. Inline payloads are written
under ``settings.document_dir`` and served back from
``settings.document_base_url``; anything that cannot be stored resolves to
``None`` so the check-in itself still goes through.
"""

from __future__ import annotations

import base64
import binascii
import logging
import time
from pathlib import Path

from gatequeue.core.config import settings
from gatequeue.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class DocumentStorage:
    def __init__(
        self,
        directory: str | Path | None = None,
        base_url: str | None = None,
        max_bytes: int | None = None,
    ):
        self._directory = Path(directory or settings.document_dir)
        self._base_url = (base_url or settings.document_base_url).rstrip("/")
        self._max_bytes = max_bytes or settings.max_upload_size_bytes

    def resolve(self, reference: str | None, record_id: str | None = None) -> str | None:
        """Return a URL for ``reference`` or None when there is no usable document."""
        if not reference:
            return None
        if reference.startswith(("http://", "https://", "/")):
            return reference
        if not reference.startswith("data:"):
            raise ValidationError("Document must be a data URL or an http(s) URL")

        payload = self._decode(reference)
        filename = f"SJ_{record_id or 'doc'}_{int(time.time() * 1000)}.jpg"
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            (self._directory / filename).write_bytes(payload)
        except OSError as exc:
            logger.error("Document upload failed for %s: %s", record_id, exc)
            return None

        logger.info("Stored document %s (%d bytes)", filename, len(payload))
        return f"{self._base_url}/{filename}"

    def _decode(self, data_url: str) -> bytes:
        _, _, encoded = data_url.partition(",")
        if not encoded:
            raise ValidationError("Document payload is empty")
        try:
            payload = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError("Document payload is not valid base64") from exc
        if len(payload) > self._max_bytes:
            raise ValidationError(
                f"Document exceeds the {self._max_bytes // (1024 * 1024)}MB limit"
            )
        return payload
