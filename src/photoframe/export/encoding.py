"""Encode fetched images into output file formats."""

from __future__ import annotations

import io

from PIL import Image

from photoframe.config.models import OutputFormat
from photoframe.errors import ExportError

JPEG_QUALITY = 95

_PIL_FORMATS = {"jpg": "JPEG", "png": "PNG"}


class ImageEncoder:
    """Serialize images as JPEG or PNG without altering their dimensions."""

    def encode(self, image: Image.Image, output_format: OutputFormat) -> bytes:
        """Return the encoded bytes for ``image``.

        Raises:
            ExportError: If the format is unknown or Pillow cannot encode the image.
        """
        pil_format = _PIL_FORMATS.get(output_format)
        if pil_format is None:
            raise ExportError(f"Unsupported output format '{output_format}'")

        buffer = io.BytesIO()
        try:
            if pil_format == "JPEG":
                if image.mode not in ("RGB", "L"):
                    image = image.convert("RGB")
                image.save(buffer, format=pil_format, quality=JPEG_QUALITY, subsampling=0)
            else:
                image.save(buffer, format=pil_format)
        except (OSError, ValueError) as exc:
            raise ExportError(f"Failed to encode image as {pil_format}: {exc}") from exc
        return buffer.getvalue()


__all__ = ["ImageEncoder", "JPEG_QUALITY"]
