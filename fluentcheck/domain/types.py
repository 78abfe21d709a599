'''
Domain types for the checker.

A Checker fills a CheckDetail for every predicate call, turns it into an
immutable CheckRecord once the predicate has been evaluated, and hands out
ValidationResult snapshots to callers.
'''

from dataclasses import dataclass
import json
from typing import Any, Optional, Tuple

PASS = 'pass'
FAIL = 'fail'
SKIP = 'skip'
ERROR = 'error'

STATUSES = (PASS, FAIL, SKIP, ERROR)


@dataclass
class CheckDetail:
  '''
  Caller-supplied description of a single predicate evaluation.

  The predicate body may update it while it runs: optional() sets status to
  SKIP, DataFrame predicates fill in message or a computed actual value.

  Attributes:
    predicate: Identifier of the rule applied (e.g. 'type', 'between')
    expected: Comparison operand or description of the expectation
    actual: Observed value or derived property
    status: SKIP when the predicate asks to skip the rest of the subject
    message: Explicit error message, overrides template formatting
  '''
  predicate: str
  expected: Any = None
  actual: Any = None
  status: Optional[str] = None
  message: Optional[str] = None


@dataclass(frozen=True)
class CheckRecord:
  '''
  Immutable log entry for one predicate evaluation.

  Attributes:
    name: Subject label at evaluation time
    predicate: Identifier of the rule applied
    expected: Comparison operand or description
    actual: Observed value or derived property
    passed: Outcome after inversion
    status: One of 'pass', 'fail', 'skip', 'error'
    invert: Whether inversion was active for this evaluation
    message: Explicit message (always set for 'error' records)
  '''
  name: str
  predicate: str
  expected: Any
  actual: Any
  passed: bool
  status: str
  invert: bool = False
  message: Optional[str] = None

  def to_dict(self) -> dict[str, Any]:
    '''Convert to a JSON-friendly dictionary.'''
    result = {
        'name': self.name,
        'predicate': self.predicate,
        'expected': self.expected,
        'actual': self.actual,
        'pass': self.passed,
        'status': self.status,
        'invert': self.invert,
    }
    if self.message is not None:
      result['message'] = self.message
    return result


@dataclass(frozen=True)
class ValidationResult:
  '''
  Terminal snapshot of a validation chain.

  Attributes:
    ok: True iff no record failed
    checks: Every CheckRecord produced, in evaluation order
    errors: Formatted message for each failed record
  '''
  ok: bool
  checks: Tuple[CheckRecord, ...] = ()
  errors: Tuple[str, ...] = ()

  @property
  def failed(self) -> Tuple[CheckRecord, ...]:
    return tuple(c for c in self.checks if not c.passed)

  def to_dict(self) -> dict[str, Any]:
    '''Convert to dictionary.'''
    return {
        'ok': self.ok,
        'checks': [c.to_dict() for c in self.checks],
        'errors': list(self.errors),
    }

  def to_json(self) -> str:
    '''Serialize to JSON string. Values JSON cannot encode are stringified.'''
    return json.dumps(self.to_dict(), indent=2, default=str)
