"""
Validation runner with reporting.

Runs many named validation chains and reports the outcome in one place.

Supports two kinds of registrations:
- checks: must pass for the run to succeed
- warnings: informational, failures are reported but don't fail the run
"""
from dataclasses import dataclass
import logging
from typing import Any, Callable, Union

from fluentcheck.checker.checker import Checker
from fluentcheck.domain.types import CheckRecord
from fluentcheck.domain.types import ERROR
from fluentcheck.domain.types import ValidationResult

logger = logging.getLogger(__name__)

ValidatorFn = Callable[..., Union[Checker, ValidationResult]]


@dataclass
class _RegisteredCheck:
  """Internal representation of a registered validation."""

  check_id: str
  validator_fn: ValidatorFn
  args: tuple[Any, ...]
  kwargs: dict[str, Any]
  is_warning: bool


@dataclass
class RunnerEntry:
  """Outcome of one registered validation."""

  check_id: str
  result: ValidationResult
  is_warning: bool

  @property
  def ok(self) -> bool:
    return self.result.ok

  @property
  def details(self) -> str:
    if self.result.errors:
      return '; '.join(self.result.errors)
    return f'{len(self.result.checks)} checks passed'


def _as_result(outcome: Any) -> ValidationResult:
  if isinstance(outcome, Checker):
    return outcome.result()
  if isinstance(outcome, ValidationResult):
    return outcome
  raise TypeError('validator must return a Checker or ValidationResult, '
                  f'got {type(outcome).__name__}')


def _exception_result(check_id: str, e: Exception) -> ValidationResult:
  message = f'raised {type(e).__name__}: {e}'
  record = CheckRecord(name=check_id,
                       predicate='run',
                       expected='no exception',
                       actual=type(e).__name__,
                       passed=False,
                       status=ERROR,
                       message=message)
  return ValidationResult(ok=False,
                          checks=(record,),
                          errors=(f'{check_id}: {message}',))


class ValidationRunner:
  """
  Run multiple validations and report results.

  Usage:
    runner = ValidationRunner('signup_form')

    # Must pass
    runner.add_check('age', lambda: check(form['age'], 'age').integer())

    # Informational
    runner.add_warning('nickname', validate_record, form, nickname_rules)

    ok = runner.run()  # Only checks affect this
    runner.print_summary()
  """

  def __init__(self, name: str):
    self.name = name
    self._registered: list[_RegisteredCheck] = []
    self.results: list[RunnerEntry] = []

  def add_check(
      self,
      check_id: str,
      validator_fn: ValidatorFn,
      *args: Any,
      **kwargs: Any,
  ) -> None:
    """
    Register a validation that must pass.

    Args:
      check_id: Identifier for this validation
      validator_fn: Function returning a Checker or ValidationResult
      *args: Positional arguments for validator_fn
      **kwargs: Keyword arguments for validator_fn
    """
    self._registered.append(
        _RegisteredCheck(check_id, validator_fn, args, kwargs, False))

  def add_warning(
      self,
      check_id: str,
      validator_fn: ValidatorFn,
      *args: Any,
      **kwargs: Any,
  ) -> None:
    """Register an informational validation (doesn't fail the run)."""
    self._registered.append(
        _RegisteredCheck(check_id, validator_fn, args, kwargs, is_warning=True))

  def run(self) -> bool:
    """
    Execute all registered validations.

    A validator that raises is recorded as a failed entry.

    Returns:
      True if all checks (not warnings) pass, False otherwise
    """
    self.results = []

    for reg in self._registered:
      try:
        result = _as_result(reg.validator_fn(*reg.args, **reg.kwargs))
      except Exception as e:  # pylint: disable=broad-except
        result = _exception_result(reg.check_id, e)
      self.results.append(RunnerEntry(reg.check_id, result, reg.is_warning))

    return self.all_passed

  def _tally(self) -> tuple[int, int, int, int]:
    checks = [r for r in self.results if not r.is_warning]
    warnings = [r for r in self.results if r.is_warning]
    return (sum(1 for r in checks if r.ok), len(checks),
            sum(1 for r in warnings if r.ok), len(warnings))

  def summary_line(self) -> str:
    """One-line tally, e.g. 'Checks: 3/4 passed (1 FAILED)'."""
    passed, total, warnings_ok, warnings = self._tally()
    line = f'Checks: {passed}/{total} passed'
    if passed < total:
      line += f' ({total - passed} FAILED)'
    if warnings:
      line += f'; warnings: {warnings_ok}/{warnings} OK'
    return line

  def print_summary(self, verbose: bool = False) -> None:
    """
    Print one line per registration, then the tally.

    Args:
      verbose: If True, print details for passing checks too
    """
    print(f'--- {self.name} ---')
    for entry in self.results:
      if entry.ok:
        mark = '✓ OK  '
      else:
        mark = '⚠ WARN' if entry.is_warning else '✗ FAIL'
      print(f'{mark} {entry.check_id}')
      if not entry.ok or verbose:
        for line in entry.result.errors or (entry.details,):
          print(f'       {line}')
    print(self.summary_line())

  def log_summary(self) -> None:
    """Log the tally at INFO and each failure at WARNING or ERROR."""
    logger.info('%s: %s', self.name, self.summary_line())
    for entry in self.results:
      if entry.ok:
        logger.debug('%s: %s', entry.check_id, entry.details)
      elif entry.is_warning:
        logger.warning('%s: %s', entry.check_id, entry.details)
      else:
        logger.error('%s: %s', entry.check_id, entry.details)

  @property
  def all_passed(self) -> bool:
    """Return True if all checks (not warnings) passed."""
    return all(r.ok for r in self.results if not r.is_warning)

  @property
  def failed_checks(self) -> list[RunnerEntry]:
    """Return failed checks (not warnings)."""
    return [r for r in self.results if not r.is_warning and not r.ok]

  @property
  def warning_issues(self) -> list[RunnerEntry]:
    """Return failed warnings."""
    return [r for r in self.results if r.is_warning and not r.ok]
