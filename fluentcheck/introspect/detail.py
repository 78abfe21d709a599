'''
Type introspection for checked values.

Every value gets a coarse type and a detail type. The coarse type is one of
a fixed set of kinds:

  string, number, bigint, boolean, symbol, function, object, undefined

The detail type adds a refinement in parentheses, which lets assertions tell
apart cases the coarse type collapses:

  detail_type_of(3)             -> 'number (Integer)'
  detail_type_of(0.5)           -> 'number (Float)'
  detail_type_of(float('nan'))  -> 'number (NaN)'
  detail_type_of(None)          -> 'object (Null)'
  detail_type_of([1, 2])        -> 'object (Array)'
  detail_type_of(pd.DataFrame()) -> 'object (DataFrame)'

Python has a single nil value, so "no value supplied" is represented by the
UNDEFINED sentinel, whose coarse type is 'undefined'. Booleans are checked
before numbers, enum members stand in for symbols, and integers outside the
IEEE-754 safe integer range report as 'bigint'.
'''

from collections.abc import Mapping
import datetime
import decimal
import enum
import functools
import inspect
import math
import numbers
import re
import types
from typing import Any, Iterable, Optional

from fluentcheck.domain.errors import InvalidArgumentError
from fluentcheck.introspect.probes import DEFAULT_PROBE_NAMES
from fluentcheck.introspect.probes import HostTypeProbe
from fluentcheck.introspect.probes import identify
from fluentcheck.introspect.probes import probes_from_names

MAX_SAFE_INTEGER = 2**53 - 1

GENERIC_TAG = 'Object'
PLAIN_DETAIL = f'object ({GENERIC_TAG})'


class _Undefined:
  '''Singleton marking an absent value.'''

  _instance: Optional['_Undefined'] = None

  def __new__(cls):
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __bool__(self) -> bool:
    return False

  def __repr__(self) -> str:
    return 'undefined'

  def __reduce__(self):
    return (_Undefined, ())


UNDEFINED = _Undefined()

# Ordered: the first matching entry names the tag.
_OBJECT_TAGS: tuple[tuple[Any, str], ...] = (
    ((list, tuple), 'Array'),
    ((datetime.date,), 'Date'),
    ((re.Pattern,), 'RegExp'),
    ((set, frozenset), 'Set'),
    ((bytes, bytearray, memoryview), 'Bytes'),
    ((BaseException,), 'Error'),
    ((Mapping, types.SimpleNamespace), GENERIC_TAG),
)

_PLAIN_TYPES = (dict, types.SimpleNamespace)


def is_nil(value: Any) -> bool:
  '''True for None and UNDEFINED.'''
  return value is None or value is UNDEFINED


def _is_numeric(value: Any) -> bool:
  if isinstance(value, bool):
    return False
  return isinstance(value, (numbers.Real, decimal.Decimal))


def _is_callable_kind(value: Any) -> bool:
  return (inspect.isroutine(value) or inspect.isclass(value) or
          isinstance(value, functools.partial))


def _function_tag(value: Any) -> str:
  if inspect.isasyncgenfunction(value):
    return 'AsyncGeneratorFunction'
  if inspect.iscoroutinefunction(value):
    return 'AsyncFunction'
  if inspect.isgeneratorfunction(value):
    return 'GeneratorFunction'
  return 'Function'


def number_type(value: Any) -> str:
  '''
  Classify a number as 'Integer', 'Float', 'NaN' or 'Infinity'.

  Integer-valued floats (3.0) are 'Integer'. The four categories are mutually
  exclusive and cover every number.

  Raises:
    InvalidArgumentError: If value is not a number
  '''
  if not _is_numeric(value) or _is_bigint(value):
    raise InvalidArgumentError('value must be a number')

  if isinstance(value, numbers.Integral):
    return 'Integer'

  if isinstance(value, decimal.Decimal):
    if value.is_finite():
      return 'Integer' if value == value.to_integral_value() else 'Float'
    return 'NaN' if value.is_nan() else 'Infinity'

  if math.isfinite(value):
    return 'Integer' if value == math.floor(value) else 'Float'
  if math.isnan(value):
    return 'NaN'
  return 'Infinity'


def _is_bigint(value: Any) -> bool:
  return (isinstance(value, numbers.Integral) and not isinstance(value, bool) and
          abs(int(value)) > MAX_SAFE_INTEGER)


class TypeIntrospector:
  '''
  Computes coarse and detail types.

  The probes used to refine generic objects are injected so callers can
  narrow or reorder them (see CheckerConfig.probes).

  Attributes:
    probes: Ordered host type probes tried for generic objects
  '''

  def __init__(self, probes: Optional[Iterable[HostTypeProbe]] = None):
    if probes is None:
      probes = probes_from_names(DEFAULT_PROBE_NAMES)
    self.probes = tuple(probes)

  def coarse_type_of(self, value: Any) -> str:
    '''Return the coarse type. Total over all inputs.'''
    if value is UNDEFINED:
      return 'undefined'
    if value is None:
      return 'object'
    if isinstance(value, bool):
      return 'boolean'
    if isinstance(value, enum.Enum):
      return 'symbol'
    if isinstance(value, str):
      return 'string'
    if _is_bigint(value):
      return 'bigint'
    if _is_numeric(value):
      return 'number'
    if _is_callable_kind(value):
      return 'function'
    return 'object'

  def tag_of(self, value: Any) -> str:
    '''Return the refinement shown inside the detail type's parentheses.'''
    coarse = self.coarse_type_of(value)
    if coarse == 'number':
      return number_type(value)
    if coarse == 'object':
      return self._object_tag(value)
    if coarse == 'function':
      return _function_tag(value)
    if coarse == 'bigint':
      return 'BigInt'
    return coarse.capitalize()

  def detail_type_of(self, value: Any) -> str:
    '''Return '<coarse> (<refinement>)', e.g. 'number (NaN)'.'''
    return f'{self.coarse_type_of(value)} ({self.tag_of(value)})'

  def is_plain_structure(self, value: Any) -> bool:
    '''
    True for a bare dict or SimpleNamespace.

    Subclasses (OrderedDict, defaultdict), custom classes and probed host
    types are not plain. Nil is never plain; an empty dict is.
    '''
    if is_nil(value):
      return False
    if self.detail_type_of(value) != PLAIN_DETAIL:
      return False
    return type(value) in _PLAIN_TYPES

  def _object_tag(self, value: Any) -> str:
    if value is None:
      return 'Null'
    for kinds, tag in _OBJECT_TAGS:
      if isinstance(value, kinds):
        return tag
    return identify(value, self.probes) or GENERIC_TAG


_default = TypeIntrospector()


def default_introspector() -> TypeIntrospector:
  '''Shared introspector using the default probes.'''
  return _default


def coarse_type_of(value: Any) -> str:
  return _default.coarse_type_of(value)


def detail_type_of(value: Any) -> str:
  return _default.detail_type_of(value)


def is_plain_structure(value: Any) -> bool:
  return _default.is_plain_structure(value)
