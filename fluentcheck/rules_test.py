import json

import pytest

from fluentcheck.config import CheckerConfig
from fluentcheck.domain.errors import InvalidArgumentError
from fluentcheck.rules import FieldRule
from fluentcheck.rules import RuleSet
from fluentcheck.rules import validate_record


class TestFieldRule:
  """Tests for FieldRule."""

  @pytest.mark.parametrize('steps', [
      'integer',
      [[]],
      [['integer'], 'between'],
      [[1, 2]],
  ])
  def test_invalid_steps(self, steps):
    with pytest.raises(ValueError, match='age'):
      FieldRule(field='age', steps=steps)

  def test_to_dict(self):
    rule = FieldRule(field='age', steps=[('integer',)], label='Age')
    assert rule.to_dict() == {
        'field': 'age',
        'steps': [['integer']],
        'label': 'Age',
    }


class TestRuleSet:
  """Tests for RuleSet loading."""

  def test_from_dict(self, user_rules):
    rule_set = RuleSet.from_dict(user_rules)
    assert [r.field for r in rule_set.rules] == ['age', 'nickname', 'status']
    assert rule_set.rules[2].label == 'account status'
    assert isinstance(rule_set.config, CheckerConfig)

  def test_json_round_trip(self, user_rules):
    rule_set = RuleSet.from_dict(user_rules)
    restored = RuleSet.from_json(rule_set.to_json())
    assert restored == rule_set

  def test_missing_rules(self):
    with pytest.raises(ValueError, match="'rules' list"):
      RuleSet.from_dict({'config': {}})

  def test_from_file(self, tmp_path, user_rules):
    path = tmp_path / 'rules.json'
    path.write_text(json.dumps(user_rules))
    assert len(RuleSet.from_file(path).rules) == 3

  def test_from_missing_file(self, tmp_path):
    with pytest.raises(FileNotFoundError):
      RuleSet.from_file(tmp_path / 'nope.json')


class TestValidateRecord:
  """Tests for validate_record."""

  def test_valid(self, user_rules):
    rule_set = RuleSet.from_dict(user_rules)
    result = validate_record(
        {'age': 30, 'nickname': 'ace', 'status': 'active'}, rule_set)
    assert result.ok
    assert len(result.checks) == 7

  def test_missing_optional_field(self, user_rules):
    rule_set = RuleSet.from_dict(user_rules)
    result = validate_record({'age': 30, 'status': 'active'}, rule_set)
    assert result.ok
    nickname = [c for c in result.checks if c.name == 'nickname']
    assert [c.status for c in nickname] == ['skip']

  def test_failures(self, user_rules):
    rule_set = RuleSet.from_dict(user_rules)
    result = validate_record({'age': 'old', 'status': 'banned'}, rule_set)
    assert not result.ok
    assert result.errors == (
        'age: expected detailed type to be number (Integer), '
        'received string (String)',
        "account status: expected value to NOT be one of ['banned'], "
        'received banned',
    )

  def test_missing_required_field(self, user_rules):
    rule_set = RuleSet.from_dict(user_rules)
    result = validate_record({'status': 'active'}, rule_set)
    assert result.errors == ('age: expected a required value, '
                             'received undefined',)

  def test_unknown_step(self):
    rule_set = RuleSet(rules=[FieldRule(field='a', steps=[['sparkly']])])
    with pytest.raises(InvalidArgumentError):
      validate_record({'a': 1}, rule_set)

  def test_no_rules(self):
    result = validate_record({'a': 1}, RuleSet())
    assert result.ok
    assert result.checks == ()
