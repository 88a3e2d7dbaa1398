import io
import hashlib
import logging
import os
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

logger = logging.getLogger(__name__)


def parse_thumbnail_width(size: str, default: int = 400) -> int:
    """
    Read the width from a thumbnail size argument such as ``w400``

    Args:
        size: Size argument from the request
        default: Width used when the argument is missing or malformed

    Returns:
        int: Width in pixels, between 16 and 2000
    """
    if size and size[0] in ('w', 'W') and size[1:].isdigit():
        return max(16, min(int(size[1:]), 2000))
    return default


def create_placeholder_image(text: str, width: int) -> Image.Image:
    """
    Create a square placeholder showing the first letter of ``text``

    The background colour is derived from the text so a file keeps the same
    placeholder between requests.
    """
    name_hash = hashlib.md5((text or '?').encode()).hexdigest()
    r = int(name_hash[0:2], 16) % 100 + 100
    g = int(name_hash[2:4], 16) % 100 + 100
    b = int(name_hash[4:6], 16) % 100 + 100

    image = Image.new('RGB', (width, width), (r, g, b))
    draw = ImageDraw.Draw(image)
    display_text = text[0].upper() if text else '?'

    try:
        font = ImageFont.truetype('arial.ttf', width // 2)
    except IOError:
        font = ImageFont.load_default()

    bbox = draw.textbbox((0, 0), display_text, font=font)
    text_width = bbox[2] - bbox[0]
    text_height = bbox[3] - bbox[1]
    position = ((width - text_width) // 2, (width - text_height) // 2)
    draw.text(position, display_text, fill=(255, 255, 255), font=font)

    return image


def render_thumbnail(file_path: str | None, name: str, mime_type: str, width: int = 400) -> io.BytesIO:
    """
    Render a JPEG thumbnail of a file

    Images are scaled down to ``width`` keeping their aspect ratio. Videos,
    missing content and unreadable images get a placeholder.

    Returns:
        BytesIO: In-memory JPEG image
    """
    image = None
    if mime_type.startswith('image/') and file_path and os.path.exists(file_path):
        try:
            with Image.open(file_path) as source:
                source.thumbnail((width, width * 4))
                image = source.convert('RGB')
        except (UnidentifiedImageError, OSError) as e:
            logger.warning('Cannot read image %s: %s', file_path, e)

    if image is None:
        image = create_placeholder_image(name, width)

    output = io.BytesIO()
    image.save(output, format='JPEG', quality=85)
    output.seek(0)
    return output
