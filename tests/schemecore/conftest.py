"""Shared fixtures and utilities for schemecore tests."""

import math

import pytest

from schemecore import SchemeCore, SchemeFixnum, SchemeValue, SchemeInexactReal, WORD32, WORD64


@pytest.fixture
def core():
    """Create a fresh 64-bit SchemeCore instance for each test."""
    return SchemeCore()


@pytest.fixture
def core32():
    """Create a SchemeCore with 32-bit fixnums."""
    return SchemeCore(word_bits=32)


@pytest.fixture
def fixnum():
    """Fixnum function set for 64-bit words."""
    return SchemeFixnum(WORD64)


@pytest.fixture
def fixnum32():
    """Fixnum function set for 32-bit words."""
    return SchemeFixnum(WORD32)


class SchemeTestHelpers:
    """Helper utilities for schemecore testing."""

    @staticmethod
    def assert_inexact_close(result: SchemeValue, expected: float, tolerance: float = 1e-12) -> None:
        """Assert that result is a flonum within tolerance of expected."""
        assert isinstance(result, SchemeInexactReal), f"Expected flonum, got {result!r}"
        assert math.isclose(result.value, expected, rel_tol=tolerance), \
            f"Expected {expected!r}, got {result.value!r}"

    @staticmethod
    def assert_formats_to(core: SchemeCore, name: str, args: tuple, expected: str) -> None:
        """Assert that a call prints as expected in Scheme notation."""
        result = core.call_and_format(name, *args)
        assert result == expected, f"Expected '{expected}', got '{result}'"


@pytest.fixture
def helpers():
    """Provide access to test helper methods."""
    return SchemeTestHelpers
