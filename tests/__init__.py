# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_candidate, make_candidates
"""

from .utils import make_attributes, make_candidate, make_candidates, make_config

__all__ = ["make_attributes", "make_candidate", "make_candidates", "make_config"]
