"""Tests for Color."""

from raycaster.core.color import BLACK, WHITE, Color


class TestColor:
    """Channel arithmetic on RGB colors."""

    def test_channels(self):
        c = Color(-0.5, 0.4, 1.7)
        assert (c.r, c.g, c.b) == (-0.5, 0.4, 1.7)

    def test_add(self):
        assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)

    def test_subtract(self):
        assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)

    def test_scalar_multiply(self):
        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)

    def test_constants(self):
        assert WHITE == Color(1, 1, 1)
        assert BLACK == Color(0, 0, 0)
        assert list(WHITE) == [1.0, 1.0, 1.0]
