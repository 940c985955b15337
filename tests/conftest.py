"""
pytest configuration and shared fixtures for the Palette Bar test suite
"""

import pytest
import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for testing

from unittest.mock import patch

import palette_bar


@pytest.fixture
def palette_size():
    """Standard palette where each hue segment is exactly 100px wide."""
    return 700, 200


@pytest.fixture
def odd_palette_sizes():
    """Palette sizes that don't divide evenly into segments."""
    return [(1, 1), (7, 2), (13, 5), (333, 101), (1080, 97)]


@pytest.fixture
def geometry():
    """A 700x200 palette inside a view with an 8px margin."""
    return palette_bar.palette_geometry(716, 216, margin=8)


@pytest.fixture
def random_points():
    """Reproducible random points inside a 700x200 palette."""
    rng = np.random.default_rng(1234)
    xs = rng.uniform(0, 700, size=500)
    ys = rng.uniform(0, 200, size=500)
    return xs, ys


@pytest.fixture
def mock_show():
    """Stop matplotlib from opening windows."""
    with patch('palette_bar.plt.show') as mock_show:
        yield mock_show


class TestHelpers:
    """Helper functions for testing."""

    @staticmethod
    def assert_valid_rgb(rgb):
        """
        Assert that a color is an (r, g, b) tuple of ints in 0-255.

        Args:
            rgb: The color to check
        """
        assert isinstance(rgb, tuple), "Color should be a tuple"
        assert len(rgb) == 3, "Color should be RGB tuple"
        assert all(isinstance(c, int) for c in rgb), "Color values should be integers"
        assert all(0 <= c <= 255 for c in rgb), f"Color values should be 0-255, got {rgb}"

    @staticmethod
    def printed_lines(mock_print):
        """Collect everything passed to a patched print() as strings."""
        return [" ".join(str(arg) for arg in call.args) for call in mock_print.call_args_list]


@pytest.fixture
def test_helpers():
    """Provide access to test helper functions."""
    return TestHelpers
