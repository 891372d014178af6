"""Core image processing utilities."""
from .image_utils import load_image_bytes, crop_to_square, resize_square, to_pil
from .image_cache import ImageCache
from .splitting import split_image
