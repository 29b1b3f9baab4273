"""Test utilities for rue applications.

    from rue.testing import TestClient
"""

from rue.testing.client import TestClient

__all__ = ["TestClient"]
