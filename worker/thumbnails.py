"""Thumbnail rendering with Pillow."""

import io

from PIL import Image


def render_thumbnail(data: bytes, width: int) -> bytes:
    """
    Resize an image to ``width`` pixels wide, keeping its aspect ratio.

    Args:
        data: Encoded source image
        width: Target width in pixels

    Returns:
        Encoded thumbnail in the source image's format (PNG if unknown)

    Raises:
        PIL.UnidentifiedImageError: If data is not a readable image
        OSError: If the image cannot be decoded or encoded
    """
    with Image.open(io.BytesIO(data)) as image:
        image_format = image.format or "PNG"
        height = max(1, round(image.height * width / image.width))
        resized = image.resize((width, height), Image.LANCZOS)

        if image_format == "JPEG" and resized.mode not in ("RGB", "L"):
            resized = resized.convert("RGB")

        output = io.BytesIO()
        resized.save(output, format=image_format)
        return output.getvalue()
