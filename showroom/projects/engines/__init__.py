"""
Showroom Projects Engines Layer.

Engines are pure Python modules that:
- Take DTOs as inputs
- Return DTOs as outputs
- Contain no HTTP / no request objects / no DB access
- Own the deterministic page decisions (content shape, CTAs, sections)
"""

from .classifier import classify
from .composer import compose, derive_ctas

__all__ = [
    "classify",
    "compose",
    "derive_ctas",
]
