"""
Unit tests for combine, the type predicates and the exported utilities.
"""

import pytest

from typetour import TourError, combine, full_name, is_number, is_string, square


@pytest.mark.unit
class TestCombine:
    """Test same-kind-in, same-kind-out combination."""

    def test_combine_strings(self):
        assert combine("a", "b") == "ab"
        assert combine("Hello", " World") == "Hello World"

    def test_combine_numbers(self):
        assert combine(2, 3) == 5
        assert combine(5, 10) == 15
        assert combine(1.5, 2) == 3.5

    @pytest.mark.parametrize("a, b", [("a", 1), (1, "a"), (None, None), (True, 1), ([1], [2])])
    def test_combine_mismatched_kinds(self, a, b):
        with pytest.raises(TourError, match="Invalid types"):
            combine(a, b)


@pytest.mark.unit
class TestPredicates:
    """Test the runtime type predicates."""

    def test_is_string(self):
        assert is_string("x")
        assert not is_string(1)

    def test_is_number(self):
        assert is_number(1)
        assert is_number(1.0)
        assert not is_number("1")
        assert not is_number(False)


@pytest.mark.unit
class TestUtilities:
    """Test the exported helpers."""

    def test_square(self):
        assert square(4) == 16
        assert square(0) == 0
        assert square(-3) == 9

    def test_full_name(self):
        assert full_name("Ada", "Lovelace") == "Ada Lovelace"
