'''
Fluent runtime validation with detailed type introspection.

Build a chain of predicates around a named value, then read the outcome or
demand a hard failure:

  from fluentcheck import check

  check(42, 'age').is_.a.number().positive().ok()        # True
  check('abc', 'code').number().result().errors
  # ('code: expected type to be number, received string',)
  check(user_id=None).required().guard()                 # raises ValidationError

Usage with rule files:
  from fluentcheck.rules import RuleSet, validate_record

  rules = RuleSet.from_json(text)
  result = validate_record({'age': 42}, rules)
'''

from fluentcheck.checker import check
from fluentcheck.checker import Checker
from fluentcheck.config import CheckerConfig
from fluentcheck.domain import CheckDetail
from fluentcheck.domain import CheckRecord
from fluentcheck.domain import InvalidArgumentError
from fluentcheck.domain import ValidationError
from fluentcheck.domain import ValidationResult
from fluentcheck.introspect import coarse_type_of
from fluentcheck.introspect import detail_type_of
from fluentcheck.introspect import is_plain_structure
from fluentcheck.introspect import TypeIntrospector
from fluentcheck.introspect import UNDEFINED
from fluentcheck.predicates import register_predicate

__all__ = [
    'check',
    'Checker',
    'CheckerConfig',
    'CheckDetail',
    'CheckRecord',
    'ValidationResult',
    'InvalidArgumentError',
    'ValidationError',
    'TypeIntrospector',
    'UNDEFINED',
    'coarse_type_of',
    'detail_type_of',
    'is_plain_structure',
    'register_predicate',
]
