# attachment_validations/utils/images.py
from PIL import Image, UnidentifiedImageError

from .files import rewound

# EXIF orientations that rotate the picture by 90 or 270 degrees
ROTATED_ORIENTATIONS = (5, 6, 7, 8)
EXIF_ORIENTATION = 0x0112


def image_dimensions(django_file):
    """(width, height) as displayed, honouring the EXIF orientation."""
    with rewound(django_file) as f:
        with Image.open(f) as img:
            width, height = img.size
            orientation = img.getexif().get(EXIF_ORIENTATION)
    if orientation in ROTATED_ORIENTATIONS:
        width, height = height, width
    return width, height


def is_processable_image(django_file) -> bool:
    try:
        with rewound(django_file) as f:
            with Image.open(f) as img:
                img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError):
        return False
    return True
