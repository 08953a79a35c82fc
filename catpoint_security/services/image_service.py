"""Cat verdict providers standing in for a cloud vision service."""

from typing import Optional

import numpy as np

from ..config.defaults import SYSTEM_CONSTANTS
from ..exceptions import InvalidImageError
from ..logging_config import get_logger
from .interfaces import ImageServiceInterface, NDArray

logger = get_logger("image_service")


def _check_request(image: NDArray, confidence_threshold: float) -> None:
    if not isinstance(image, np.ndarray) or image.size == 0:
        raise InvalidImageError("Image must be a non-empty numpy array")
    if not (SYSTEM_CONSTANTS["MIN_SENSITIVITY_THRESHOLD"] <= confidence_threshold
            <= SYSTEM_CONSTANTS["MAX_SENSITIVITY_THRESHOLD"]):
        raise InvalidImageError(f"Confidence threshold out of range: {confidence_threshold}")


class FakeImageService(ImageServiceInterface):
    """Returns a random verdict, ignoring image content."""

    def __init__(self, cat_probability: float = 0.5, seed: Optional[int] = None):
        if not 0.0 <= cat_probability <= 1.0:
            raise ValueError(f"cat_probability must be within [0, 1], got {cat_probability}")
        self.cat_probability = cat_probability
        self._rng = np.random.default_rng(seed)

    def image_contains_cat(self, image: NDArray, confidence_threshold: float) -> bool:
        _check_request(image, confidence_threshold)
        verdict = bool(self._rng.random() < self.cat_probability)
        logger.debug(f"Fake verdict for image {image.shape}: {verdict}")
        return verdict


class StaticImageService(ImageServiceInterface):
    """Always returns the same verdict."""

    def __init__(self, verdict: bool = False):
        self.verdict = verdict

    def image_contains_cat(self, image: NDArray, confidence_threshold: float) -> bool:
        _check_request(image, confidence_threshold)
        return self.verdict
