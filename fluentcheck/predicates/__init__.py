"""
Plugin predicates.

Importing this package registers the DataFrame predicates. To add a
predicate, write a function taking the checker first, evaluate through
checker.run(), and decorate it with register_predicate (see registry.py).
"""

from fluentcheck.predicates import frames
from fluentcheck.predicates.registry import get_predicate
from fluentcheck.predicates.registry import list_predicates
from fluentcheck.predicates.registry import PREDICATES
from fluentcheck.predicates.registry import register_predicate
from fluentcheck.predicates.registry import unregister_predicate

__all__ = [
    'PREDICATES',
    'frames',
    'get_predicate',
    'list_predicates',
    'register_predicate',
    'unregister_predicate',
]
