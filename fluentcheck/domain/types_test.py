import dataclasses
import json

import pytest

from fluentcheck.domain.errors import ValidationError
from fluentcheck.domain.types import CheckDetail
from fluentcheck.domain.types import CheckRecord
from fluentcheck.domain.types import FAIL
from fluentcheck.domain.types import PASS
from fluentcheck.domain.types import ValidationResult


def _record(passed: bool = True, **kwargs) -> CheckRecord:
  fields = {
      'name': 'age',
      'predicate': 'type',
      'expected': 'number',
      'actual': 'string',
      'passed': passed,
      'status': PASS if passed else FAIL,
  }
  fields.update(kwargs)
  return CheckRecord(**fields)


class TestCheckDetail:
  """Tests for CheckDetail."""

  def test_defaults(self):
    detail = CheckDetail(predicate='type')
    assert detail.status is None
    assert detail.message is None

  def test_mutable(self):
    """Predicates may update the detail while evaluating."""
    detail = CheckDetail(predicate='optional')
    detail.status = 'skip'
    assert detail.status == 'skip'


class TestCheckRecord:
  """Tests for CheckRecord."""

  def test_frozen(self):
    record = _record()
    with pytest.raises(dataclasses.FrozenInstanceError):
      record.passed = False

  def test_to_dict_uses_pass_key(self):
    result = _record(passed=False).to_dict()
    assert result['pass'] is False
    assert result['status'] == 'fail'
    assert 'passed' not in result
    assert 'message' not in result

  def test_to_dict_message(self):
    result = _record(passed=False, message='boom').to_dict()
    assert result['message'] == 'boom'


class TestValidationResult:
  """Tests for ValidationResult."""

  def test_failed(self):
    ok_record = _record()
    bad_record = _record(passed=False)
    result = ValidationResult(ok=False,
                              checks=(ok_record, bad_record),
                              errors=('age: bad',))
    assert result.failed == (bad_record,)

  def test_to_json(self):
    """Non-JSON values are stringified."""
    result = ValidationResult(ok=True,
                              checks=(_record(actual=object()),),
                              errors=())
    data = json.loads(result.to_json())
    assert data['ok'] is True
    assert data['errors'] == []
    assert data['checks'][0]['pass'] is True
    assert data['checks'][0]['actual'].startswith('<object object')


class TestValidationError:
  """Tests for ValidationError."""

  def test_message_and_result(self):
    result = ValidationResult(ok=False,
                              checks=(_record(passed=False),),
                              errors=('a: one', 'b: two'))
    error = ValidationError(result)
    assert str(error) == 'a: one\nb: two'
    assert error.result is result
    assert error.errors == ('a: one', 'b: two')
    assert isinstance(error, TypeError)
