"""
Tests for the Function Registry
"""

import pytest

from benchmark_functions import (
    FUNCTION_REGISTRY,
    get_function,
    get_all_functions,
    list_functions,
    Sphere,
    Rastrigin,
    ChankongHaimes,
)


class TestLookup:
    """Test lookup by name."""

    def test_all_registered(self):
        """Test every catalogue function is registered."""
        assert len(get_all_functions()) == 10
        assert set(FUNCTION_REGISTRY) == {
            "sphere", "rastrigin", "rosenbrock", "ackley", "matyas",
            "griewank", "ridge", "zakharov", "salomon", "chankong_haimes",
        }

    def test_by_name(self):
        """Test lookup by registry name."""
        assert get_function("sphere") is Sphere
        assert get_function("chankong_haimes") is ChankongHaimes

    def test_case_insensitive(self):
        """Test lookup ignores case and hyphens."""
        assert get_function("Rastrigin") is Rastrigin
        assert get_function("CHANKONG-HAIMES") is ChankongHaimes

    def test_by_class_name(self):
        """Test lookup by class name."""
        assert get_function("ChankongHaimes") is ChankongHaimes

    def test_unknown(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown function"):
            get_function("himmelblau")

    def test_names_match_registry_keys(self):
        """Test registry keys match NAME."""
        for name, function in FUNCTION_REGISTRY.items():
            assert function.NAME == name


class TestFiltering:
    """Test filtering by trait."""

    def test_no_filter(self):
        """Test no filter returns every function."""
        assert list_functions() == get_all_functions()

    def test_single_objective(self):
        """Test filtering single-objective functions."""
        functions = list_functions(single_objective=True)
        assert len(functions) == 9
        assert ChankongHaimes not in functions

    def test_multi_objective(self):
        """Test filtering multi-objective functions."""
        assert list_functions(single_objective=False) == [ChankongHaimes]

    def test_unbounded(self):
        """Test filtering functions without box bounds."""
        # ChankongHaimes declares no domain at all
        assert list_functions(bounded=False) == [Sphere, ChankongHaimes]

    def test_bounded(self):
        """Test filtering bounded functions."""
        functions = list_functions(bounded=True)
        assert len(functions) == 8
        assert Sphere not in functions

    def test_constrained(self):
        """Test filtering constrained functions."""
        assert list_functions(constrained=True) == [ChankongHaimes]

    def test_fixed_dimension(self):
        """Test filtering fixed-dimensional functions."""
        assert list_functions(fixed_dimension=True) == [ChankongHaimes]

    def test_combined(self):
        """Test combining filters."""
        assert list_functions(single_objective=True, bounded=False) == [Sphere]
