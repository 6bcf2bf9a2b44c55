"""
Core domain logic: exceptions, validation rules and the lookup cache.
"""

from mindfulness.core.cache import LRUCache
from mindfulness.core.exceptions import DataAccessError, MindfulnessError, ValidationError

__all__ = ["DataAccessError", "LRUCache", "MindfulnessError", "ValidationError"]
