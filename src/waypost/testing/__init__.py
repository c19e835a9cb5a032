"""Test utilities for waypost route tables.

    from waypost.testing import assert_routes_to, assert_no_route
"""

from waypost.testing.assertions import assert_no_route, assert_routes_to

__all__ = [
    "assert_no_route",
    "assert_routes_to",
]
