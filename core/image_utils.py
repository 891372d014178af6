"""Low-level image operations."""

import cv2
import numpy as np
from PIL import Image


def load_image_bytes(data: bytes) -> np.ndarray:
    """Decode encoded image bytes with OpenCV (BGR format)."""
    if not data:
        raise ValueError("Empty image data")
    buffer = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError("Could not decode image data")
    return img


def crop_to_square(image):
    """Center-crop to a square using the shorter side."""
    h, w = image.shape[:2]
    side = min(h, w)
    y = (h - side) // 2
    x = (w - side) // 2
    return image[y:y + side, x:x + side]


def resize_square(image, target_size=800):
    """
    Center-crop and resize to target_size x target_size.
    
    Args:
        image: BGR image
        target_size: Output side length in pixels
    
    Returns:
        Square BGR image
    """
    if target_size <= 0:
        raise ValueError(f"Target size must be positive, got {target_size}")
    square = crop_to_square(image)
    return cv2.resize(square, (target_size, target_size), interpolation=cv2.INTER_AREA)


def to_pil(image):
    """Convert BGR numpy image to a PIL RGB image."""
    if len(image.shape) == 2:
        return Image.fromarray(image)
    return Image.fromarray(cv2.cvtColor(image, cv2.COLOR_BGR2RGB))
