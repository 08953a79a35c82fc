"""Utility functions for the security system."""

import os

import cv2
import numpy as np

from .exceptions import InvalidImageError


def decode_image_bytes(data: bytes) -> np.ndarray:
    """Decode an encoded image (JPEG, PNG, ...) into a BGR array."""
    if not data:
        raise InvalidImageError("Empty image data")

    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
    if image is None:
        raise InvalidImageError("Image data could not be decoded")
    return image


def load_image_file(path: str) -> np.ndarray:
    """Read an image file from disk into a BGR array."""
    if not os.path.isfile(path):
        raise InvalidImageError(f"Image file not found: {path}")

    image = cv2.imread(path, cv2.IMREAD_COLOR)
    if image is None:
        raise InvalidImageError(f"Image file could not be decoded: {path}")
    return image


def encode_image_jpeg(image: np.ndarray, quality: int = 85) -> bytes:
    """Encode a BGR array as JPEG bytes."""
    success, buffer = cv2.imencode('.jpg', image, [cv2.IMWRITE_JPEG_QUALITY, quality])
    if not success:
        raise InvalidImageError("Image could not be encoded as JPEG")
    return buffer.tobytes()
