import logging

from fluentcheck.checker.checker import check
from fluentcheck.domain.types import ValidationResult
from fluentcheck.runner import ValidationRunner


def _boom():
  raise RuntimeError('database unavailable')


class TestValidationRunner:
  """Tests for ValidationRunner."""

  def test_all_pass(self):
    runner = ValidationRunner('form')
    runner.add_check('age', lambda: check(30, 'age').integer())
    runner.add_check('name', lambda: check('ann', 'name').string().result())
    assert runner.run()
    assert runner.all_passed
    assert runner.failed_checks == []

  def test_args_forwarded(self):
    runner = ValidationRunner('form')
    runner.add_check('age', check, 30, 'age')
    assert runner.run()
    assert runner.results[0].details == '0 checks passed'

  def test_failed_check(self):
    runner = ValidationRunner('form')
    runner.add_check('age', lambda: check('x', 'age').integer())
    assert not runner.run()
    assert [e.check_id for e in runner.failed_checks] == ['age']
    assert runner.failed_checks[0].details.startswith('age: expected detailed')

  def test_warnings_do_not_fail(self):
    runner = ValidationRunner('form')
    runner.add_check('age', lambda: check(30, 'age').integer())
    runner.add_warning('nick', lambda: check(5, 'nick').string())
    assert runner.run()
    assert [e.check_id for e in runner.warning_issues] == ['nick']

  def test_exception_recorded(self):
    runner = ValidationRunner('form')
    runner.add_check('db', _boom)
    assert not runner.run()
    entry = runner.results[0]
    assert entry.result.errors == (
        'db: raised RuntimeError: database unavailable',)
    assert entry.result.checks[0].status == 'error'

  def test_bad_return_type(self):
    runner = ValidationRunner('form')
    runner.add_check('oops', lambda: True)
    assert not runner.run()
    assert 'raised TypeError' in runner.results[0].details

  def test_rerun_resets_results(self):
    runner = ValidationRunner('form')
    runner.add_check('ok', lambda: ValidationResult(ok=True))
    runner.run()
    runner.run()
    assert len(runner.results) == 1

  def test_print_summary(self, capsys):
    runner = ValidationRunner('form')
    runner.add_check('age', lambda: check('x', 'age').integer())
    runner.add_check('name', lambda: check('ann', 'name').string())
    runner.add_warning('nick', lambda: check(5, 'nick').string())
    runner.run()
    runner.print_summary()
    out = capsys.readouterr().out
    assert '--- form ---' in out
    assert '✗ FAIL age' in out
    assert '✓ OK   name' in out
    assert '⚠ WARN nick' in out
    assert 'Checks: 1/2 passed (1 FAILED); warnings: 0/1 OK' in out

  def test_log_summary(self, caplog):
    runner = ValidationRunner('form')
    runner.add_check('age', lambda: check('x', 'age').integer())
    runner.run()
    with caplog.at_level(logging.INFO, logger='fluentcheck.runner'):
      runner.log_summary()
    assert 'form: Checks: 0/1 passed (1 FAILED)' in caplog.text
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
