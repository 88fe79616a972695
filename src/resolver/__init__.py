"""Object resolver module.

This module resolves the words bound to a grammar slot to a game object:
- Noun check
- Existence check (partial adjectives, any order)
- Kind check with ambiguity detection
"""

from src.resolver.object_resolver import (
    ObjectResolver,
    ResolutionFailure,
    ResolutionResult,
)

__all__ = [
    "ObjectResolver",
    "ResolutionFailure",
    "ResolutionResult",
]
