"""Unit tests for cat verdict providers."""

import unittest
import sys
import os

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catpoint_security.exceptions import InvalidImageError
from catpoint_security.services.image_service import FakeImageService, StaticImageService


class TestFakeImageService(unittest.TestCase):
    """Test cases for FakeImageService."""

    def setUp(self):
        """Set up test fixtures."""
        self.image = np.zeros((16, 16, 3), dtype=np.uint8)

    def test_seeded_verdicts_are_reproducible(self):
        first = FakeImageService(seed=42)
        second = FakeImageService(seed=42)
        verdicts = [first.image_contains_cat(self.image, 50.0) for _ in range(20)]
        self.assertEqual(verdicts, [second.image_contains_cat(self.image, 50.0) for _ in range(20)])
        self.assertTrue(all(isinstance(v, bool) for v in verdicts))

    def test_probability_extremes(self):
        always = FakeImageService(cat_probability=1.0, seed=1)
        never = FakeImageService(cat_probability=0.0, seed=1)
        for _ in range(10):
            self.assertTrue(always.image_contains_cat(self.image, 50.0))
            self.assertFalse(never.image_contains_cat(self.image, 50.0))

    def test_invalid_probability(self):
        with self.assertRaises(ValueError):
            FakeImageService(cat_probability=1.5)

    def test_rejects_non_array_image(self):
        service = FakeImageService(seed=3)
        with self.assertRaises(InvalidImageError):
            service.image_contains_cat(b"not an image", 50.0)
        with self.assertRaises(InvalidImageError):
            service.image_contains_cat(np.array([]), 50.0)

    def test_rejects_out_of_range_threshold(self):
        service = FakeImageService(seed=3)
        with self.assertRaises(InvalidImageError):
            service.image_contains_cat(self.image, 150.0)


class TestStaticImageService(unittest.TestCase):
    """Test cases for StaticImageService."""

    def test_fixed_verdict(self):
        image = np.ones((4, 4), dtype=np.uint8)
        self.assertTrue(StaticImageService(True).image_contains_cat(image, 10.0))
        self.assertFalse(StaticImageService().image_contains_cat(image, 10.0))


if __name__ == '__main__':
    unittest.main()
