"""Test data factories for deterministic test data generation."""

from tests.factories.og import (
    make_account,
    make_anonymous,
    make_group,
    make_membership,
)

__all__ = [
    "make_account",
    "make_anonymous",
    "make_group",
    "make_membership",
]
