'''
Fluent, chainable runtime validation.

A Checker wraps a named value (the subject) and records one CheckRecord per
predicate call. The first failing predicate aborts the rest of the subject's
chain; check() moves on to a new subject while keeping the history.

Usage:
  from fluentcheck import check

  check(42, 'age').is_.a.number().positive().ok()          # True
  check(age=42).integer().between(0, 130).guard()          # returns checker
  check(None, 'nickname').optional().string().ok()         # True, skipped
  check(float('nan'), 'x').not_.finite().ok()              # True

  result = (check(payload, 'payload').plain_object()
            .check(user_id, 'user_id').required().integer()
            .result())
'''

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fluentcheck.checker.formatting import format_error
from fluentcheck.config import CheckerConfig
from fluentcheck.config import create_introspector
from fluentcheck.config import DEFAULT_LABEL_TEMPLATE
from fluentcheck.domain.errors import InvalidArgumentError
from fluentcheck.domain.errors import ValidationError
from fluentcheck.domain.types import CheckDetail
from fluentcheck.domain.types import CheckRecord
from fluentcheck.domain.types import ERROR
from fluentcheck.domain.types import FAIL
from fluentcheck.domain.types import PASS
from fluentcheck.domain.types import SKIP
from fluentcheck.domain.types import ValidationResult
from fluentcheck.introspect.detail import default_introspector
from fluentcheck.introspect.detail import is_nil
from fluentcheck.introspect.detail import TypeIntrospector
from fluentcheck.introspect.detail import UNDEFINED
from fluentcheck.predicates.registry import get_predicate

logger = logging.getLogger(__name__)

_SINGLE_PAIR = 'object must contain a single name:value pair'

_COLLECTIONS = (list, tuple, set, frozenset)

# Checker methods reachable by name through apply() and rule files.
BUILTIN_PREDICATES = frozenset({
    'required', 'optional', 'opt', 'type', 'type_detail', 'string', 'number',
    'bigint', 'boolean', 'function', 'object', 'symbol', 'undefined', 'null',
    'nil', 'integer', 'float', 'nan', 'infinity', 'finite', 'array', 'regex',
    'date', 'plain_object', 'truthy', 'falsy', 'equal', 'equals', 'one_of',
    'none_of', 'min_length', 'max_length', 'positive', 'negative', 'between',
    'less_than', 'less', 'lt', 'less_than_or_equal', 'less_or_equal', 'lte',
    'greater_than', 'greater', 'gt', 'greater_than_or_equal',
    'greater_or_equal', 'gte', 'multiple_of'
})


def _split_subject(
    introspector: TypeIntrospector,
    value: Any,
    name: Optional[str],
    named: dict[str, Any],
) -> tuple[Any, Optional[str]]:
  '''Resolve (value, name) from the positional and shorthand forms.'''
  if named:
    if len(named) != 1 or value is not UNDEFINED or name is not None:
      raise InvalidArgumentError(_SINGLE_PAIR)
    ((name, value),) = named.items()
    return value, name

  if name is None and isinstance(value, dict) and value:
    if not introspector.is_plain_structure(value):
      return value, name
    if len(value) != 1:
      raise InvalidArgumentError(_SINGLE_PAIR)
    ((key, value),) = value.items()
    return value, str(key)

  return value, name


def _require_option(option: Any, kind: type, keyword: str) -> None:
  '''Keyword options share the shorthand namespace; reject misplaced fields.'''
  if option is not None and not isinstance(option, kind):
    raise InvalidArgumentError(
        f'{keyword} must be a {kind.__name__}, received '
        f'{type(option).__name__}; pass a field named {keyword!r} as '
        f'check(value, {keyword!r})')


def _require_collection(values: Any, predicate: str) -> None:
  if not isinstance(values, _COLLECTIONS):
    raise InvalidArgumentError(
        f'{predicate}() requires a list, tuple or set, '
        f'received {type(values).__name__}')


class Checker:
  '''
  Chainable validator over a sequence of subjects.

  Attributes:
    value: Current subject value
    name: Current subject label
    coarse_type: Coarse type of the current subject
    detail_type: Detail type of the current subject
  '''

  def __init__(
      self,
      value: Any = UNDEFINED,
      name: Optional[str] = None,
      /,
      *,
      introspector: Optional[TypeIntrospector] = None,
      label_template: str = DEFAULT_LABEL_TEMPLATE,
      **named: Any,
  ):
    _require_option(introspector, TypeIntrospector, 'introspector')
    _require_option(label_template, str, 'label_template')
    self._introspector = introspector or default_introspector()
    self._label_template = label_template
    self._count = 0
    self._invert = False
    self._aborted = False
    self._skipping = False
    self._checks: list[CheckRecord] = []
    self._errors: list[str] = []

    self.value: Any = UNDEFINED
    self.name = ''
    self.coarse_type = ''
    self.detail_type = ''
    self.check(value, name, **named)

  def __repr__(self) -> str:
    return (f'Checker(name={self.name!r}, detail_type={self.detail_type!r}, '
            f'checks={len(self._checks)}, errors={len(self._errors)})')

  # Subjects

  def check(self,
            value: Any = UNDEFINED,
            name: Optional[str] = None,
            /,
            **named: Any) -> Checker:
    '''
    Replace the subject, keeping the recorded history.

    Accepts (value, name), a single-key dict {name: value}, or a single
    keyword argument name=value. Resets inversion, abort and skip.

    Raises:
      InvalidArgumentError: If the shorthand form holds more than one pair
    '''
    value, name = _split_subject(self._introspector, value, name, named)
    self._count += 1
    self.value = value
    self.name = (name if name is not None else
                 self._label_template.format(n=self._count))
    self.coarse_type = self._introspector.coarse_type_of(value)
    self.detail_type = self._introspector.detail_type_of(value)
    self._invert = False
    self._aborted = False
    self._skipping = False
    return self

  @property
  def checks(self) -> tuple[CheckRecord, ...]:
    return tuple(self._checks)

  @property
  def errors(self) -> tuple[str, ...]:
    return tuple(self._errors)

  # Modifiers

  @property
  def not_(self) -> Checker:
    '''Invert the outcome of the next predicate only.'''
    self._invert = not self._invert
    return self

  @property
  def is_(self) -> Checker:
    return self

  @property
  def are(self) -> Checker:
    return self

  @property
  def to(self) -> Checker:
    return self

  @property
  def be(self) -> Checker:
    return self

  @property
  def has(self) -> Checker:
    return self

  @property
  def have(self) -> Checker:
    return self

  @property
  def a(self) -> Checker:
    return self

  @property
  def an(self) -> Checker:
    return self

  def required(self) -> Checker:
    '''
    The subject must not be nil (None or UNDEFINED).

    not_.required() behaves as optional().
    '''
    if self._invert:
      self._invert = False
      return self.optional()

    return self.run(
        CheckDetail(predicate='required',
                    expected='value must not be nil',
                    actual=self.value),
        lambda: not is_nil(self.value),
    )

  def optional(self) -> Checker:
    '''
    The subject may be nil. A nil subject skips the rest of its chain.

    not_.optional() behaves as required().
    '''
    if self._invert:
      self._invert = False
      return self.required()

    detail = CheckDetail(predicate='optional',
                         expected='value may be nil',
                         actual=self.value)

    def predicate() -> bool:
      if is_nil(self.value):
        detail.status = SKIP
      return True

    return self.run(detail, predicate)

  def opt(self) -> Checker:
    return self.optional()

  # Type predicates

  def type(self, expected: str) -> Checker:
    '''Coarse type equals expected, e.g. check('x').type('string').'''
    return self.run(
        CheckDetail(predicate='type', expected=expected,
                    actual=self.coarse_type),
        lambda: self.coarse_type == expected,
    )

  def type_detail(self, expected: str) -> Checker:
    '''Detail type equals expected, e.g. 'object (DataFrame)'.'''
    return self.run(
        CheckDetail(predicate='type_detail',
                    expected=expected,
                    actual=self.detail_type),
        lambda: self.detail_type == expected,
    )

  def string(self) -> Checker:
    return self.type('string')

  def number(self) -> Checker:
    return self.type('number')

  def bigint(self) -> Checker:
    return self.type('bigint')

  def boolean(self) -> Checker:
    return self.type('boolean')

  def function(self) -> Checker:
    return self.type('function')

  def object(self) -> Checker:
    return self.type('object')

  def symbol(self) -> Checker:
    return self.type('symbol')

  def undefined(self) -> Checker:
    return self.type('undefined')

  def null(self) -> Checker:
    return self.type_detail('object (Null)')

  def nil(self) -> Checker:
    '''Subject is None or UNDEFINED.'''
    return self.run(
        CheckDetail(predicate='nil',
                    expected='None or undefined',
                    actual=self.coarse_type),
        lambda: is_nil(self.value),
    )

  def integer(self) -> Checker:
    return self.type_detail('number (Integer)')

  def float(self) -> Checker:
    return self.type_detail('number (Float)')

  def nan(self) -> Checker:
    return self.type_detail('number (NaN)')

  def infinity(self) -> Checker:
    return self.type_detail('number (Infinity)')

  def finite(self) -> Checker:
    return self.run(
        CheckDetail(predicate='finite',
                    expected='number (Integer) or number (Float)',
                    actual=self.detail_type),
        lambda: self.detail_type in ('number (Integer)', 'number (Float)'),
    )

  def array(self) -> Checker:
    return self.type_detail('object (Array)')

  def regex(self) -> Checker:
    return self.type_detail('object (RegExp)')

  def date(self) -> Checker:
    return self.type_detail('object (Date)')

  def plain_object(self) -> Checker:
    '''Subject is a bare dict or SimpleNamespace.'''
    return self.run(
        CheckDetail(predicate='plain_object',
                    expected='object (Object)',
                    actual=self.detail_type),
        lambda: self._introspector.is_plain_structure(self.value),
    )

  # Truthiness

  def truthy(self) -> Checker:
    detail = CheckDetail(predicate='truthy', expected=True)

    def predicate() -> bool:
      detail.actual = bool(self.value)
      return detail.actual

    return self.run(detail, predicate)

  def falsy(self) -> Checker:
    detail = CheckDetail(predicate='falsy', expected=False)

    def predicate() -> bool:
      detail.actual = bool(self.value)
      return not detail.actual

    return self.run(detail, predicate)

  # Equality and membership

  def _strictly_equal(self, other: Any) -> bool:
    if self._introspector.coarse_type_of(other) != self.coarse_type:
      return False
    return bool(self.value == other)

  def equal(self, expected: Any) -> Checker:
    '''
    Strict equality: same coarse type and ==.

    check(1, 'n').equal(1.0)   passes
    check(1, 'n').equal(True)  fails
    check('1', 'n').equal(1)   fails
    '''
    return self.run(
        CheckDetail(predicate='equal', expected=expected, actual=self.value),
        lambda: self._strictly_equal(expected),
    )

  def equals(self, expected: Any) -> Checker:
    return self.equal(expected)

  def one_of(self, values: Any) -> Checker:
    '''
    Subject strictly equals one of values.

    Raises:
      InvalidArgumentError: If values is not a list, tuple or set
    '''
    _require_collection(values, 'one_of')
    return self.run(
        CheckDetail(predicate='one_of',
                    expected=f'one of {list(values)}',
                    actual=self.value),
        lambda: any(self._strictly_equal(v) for v in values),
    )

  def none_of(self, values: Any) -> Checker:
    '''
    Subject equals none of values.

    Raises:
      InvalidArgumentError: If values is not a list, tuple or set
    '''
    _require_collection(values, 'none_of')
    return self.run(
        CheckDetail(predicate='none_of',
                    expected=f'none of {list(values)}',
                    actual=self.value),
        lambda: not any(self._strictly_equal(v) for v in values),
    )

  # Lengths

  def _length_check(self, predicate: str, expected: str,
                    accept: Callable[[int], bool]) -> Checker:
    detail = CheckDetail(predicate=predicate, expected=expected)

    def evaluate() -> bool:
      detail.actual = len(self.value)
      return accept(detail.actual)

    return self.run(detail, evaluate)

  def min_length(self, expected: int) -> Checker:
    return self._length_check('min_length', f'length >= {expected}',
                              lambda n: n >= expected)

  def max_length(self, expected: int) -> Checker:
    return self._length_check('max_length', f'length <= {expected}',
                              lambda n: n <= expected)

  # Numbers

  def positive(self) -> Checker:
    return self.greater_than(0)

  def negative(self) -> Checker:
    return self.less_than(0)

  def between(self, low: Any, high: Any) -> Checker:
    '''low <= subject <= high.'''
    return self.run(
        CheckDetail(predicate='between',
                    expected=f'value >= {low} and <= {high}',
                    actual=self.value),
        lambda: low <= self.value <= high,
    )

  def less_than(self, expected: Any) -> Checker:
    return self.run(
        CheckDetail(predicate='less_than',
                    expected=f'less than {expected}',
                    actual=self.value),
        lambda: self.value < expected,
    )

  def less(self, expected: Any) -> Checker:
    return self.less_than(expected)

  def lt(self, expected: Any) -> Checker:
    return self.less_than(expected)

  def less_than_or_equal(self, expected: Any) -> Checker:
    return self.run(
        CheckDetail(predicate='less_than_or_equal',
                    expected=f'less than or equal to {expected}',
                    actual=self.value),
        lambda: self.value <= expected,
    )

  def less_or_equal(self, expected: Any) -> Checker:
    return self.less_than_or_equal(expected)

  def lte(self, expected: Any) -> Checker:
    return self.less_than_or_equal(expected)

  def greater_than(self, expected: Any) -> Checker:
    return self.run(
        CheckDetail(predicate='greater_than',
                    expected=f'greater than {expected}',
                    actual=self.value),
        lambda: self.value > expected,
    )

  def greater(self, expected: Any) -> Checker:
    return self.greater_than(expected)

  def gt(self, expected: Any) -> Checker:
    return self.greater_than(expected)

  def greater_than_or_equal(self, expected: Any) -> Checker:
    return self.run(
        CheckDetail(predicate='greater_than_or_equal',
                    expected=f'greater than or equal to {expected}',
                    actual=self.value),
        lambda: self.value >= expected,
    )

  def greater_or_equal(self, expected: Any) -> Checker:
    return self.greater_than_or_equal(expected)

  def gte(self, expected: Any) -> Checker:
    return self.greater_than_or_equal(expected)

  def multiple_of(self, expected: Any) -> Checker:
    return self.run(
        CheckDetail(predicate='multiple_of',
                    expected=f'multiple of {expected}',
                    actual=self.value),
        lambda: self.value % expected == 0,
    )

  # Extension points

  def satisfies(self,
                fn: Callable[[Any], Any],
                expected: Any = 'custom predicate',
                predicate: str = 'satisfies') -> Checker:
    '''
    Run an ad-hoc predicate over the subject value.

    Raises:
      InvalidArgumentError: If fn is not callable
    '''
    if not callable(fn):
      raise InvalidArgumentError('satisfies() requires a callable')
    return self.run(
        CheckDetail(predicate=predicate, expected=expected, actual=self.value),
        lambda: fn(self.value),
    )

  def apply(self, name: str, *args: Any, **kwargs: Any) -> Checker:
    '''
    Run a built-in or registered predicate by name.

    Raises:
      InvalidArgumentError: If no predicate has that name
    '''
    if name in BUILTIN_PREDICATES:
      return getattr(self, name)(*args, **kwargs)
    try:
      fn = get_predicate(name)
    except KeyError as e:
      raise InvalidArgumentError(str(e.args[0])) from e
    return fn(self, *args, **kwargs)

  # Terminal operations

  def ok(self) -> bool:
    '''True if no check failed.'''
    return not self._errors

  def result(self) -> ValidationResult:
    '''Snapshot of the chain; later calls do not change it.'''
    return ValidationResult(ok=self.ok(),
                            checks=tuple(self._checks),
                            errors=tuple(self._errors))

  def guard(self) -> Checker:
    '''
    Return self if ok, otherwise raise.

    Raises:
      ValidationError: Message joins every error with newlines; the
        exception carries the ValidationResult as .result
    '''
    if not self.ok():
      raise ValidationError(self.result())
    return self

  # Evaluation

  def run(self, detail: CheckDetail, predicate: Callable[[], Any]) -> Checker:
    '''
    Evaluate one predicate and record the outcome.

    Every predicate goes through here. Inversion applies to this call only
    and is cleared on every path. Once a predicate fails, or optional() has
    skipped a nil subject, later calls on the same subject record nothing.
    Exceptions raised by the predicate become 'error' records.

    Raises:
      InvalidArgumentError: If predicate is not callable or detail is not a
        CheckDetail
    '''
    if not callable(predicate):
      raise InvalidArgumentError('predicate must be callable')
    if not isinstance(detail, CheckDetail):
      raise InvalidArgumentError('detail must be a CheckDetail')

    invert = self._invert
    if self._aborted or self._skipping:
      self._invert = False
      return self

    exception_message = None
    try:
      passed = bool(predicate())
      if invert:
        passed = not passed
      status = PASS if passed else FAIL
      if detail.status == SKIP:
        status = SKIP
        passed = True
        self._skipping = True
    except Exception as e:  # pylint: disable=broad-except
      passed = False
      status = ERROR
      exception_message = f'predicate raised {type(e).__name__}: {e}'

    record = CheckRecord(
        name=self.name,
        predicate=detail.predicate,
        expected=detail.expected,
        actual=detail.actual,
        passed=passed,
        status=status,
        invert=invert,
        message=exception_message or detail.message,
    )
    self._checks.append(record)

    if not passed:
      self._aborted = True
      error = format_error(record)
      self._errors.append(error)
      logger.debug('check failed: %s', error)

    self._invert = False
    return self


def check(value: Any = UNDEFINED,
          name: Optional[str] = None,
          /,
          *,
          introspector: Optional[TypeIntrospector] = None,
          config: Optional[CheckerConfig] = None,
          **named: Any) -> Checker:
  '''
  Create a Checker.

  Args:
    value: Value to check
    name: Label used in error messages (default 'value #1')
    introspector: TypeIntrospector to use; built from config if omitted
    config: CheckerConfig with label template and probe selection
    **named: Shorthand form, check(age=42); any field name other than
      introspector and config, including name and value

  Raises:
    InvalidArgumentError: If the shorthand form holds more than one pair,
      or introspector or config is not of the expected type
  '''
  _require_option(config, CheckerConfig, 'config')
  _require_option(introspector, TypeIntrospector, 'introspector')
  label_template = DEFAULT_LABEL_TEMPLATE
  if config is not None:
    label_template = config.label_template
    if introspector is None:
      introspector = create_introspector(config)
  if named:
    value, name = _split_subject(introspector or default_introspector(),
                                 value, name, named)
  return Checker(value,
                 name,
                 introspector=introspector,
                 label_template=label_template)
