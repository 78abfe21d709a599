import json
import logging

import pytest

from fluentcheck.rules import RuleSet
from fluentcheck.validate import build_runner
from fluentcheck.validate import load_records
from fluentcheck.validate import main


@pytest.fixture
def rules_path(tmp_path, user_rules):
  path = tmp_path / 'rules.json'
  path.write_text(json.dumps(user_rules))
  return path


class TestLoadRecords:
  """Tests for load_records."""

  def test_json_object(self, tmp_path):
    path = tmp_path / 'one.json'
    path.write_text(json.dumps({'age': 3}))
    assert load_records(path) == [{'age': 3}]

  def test_json_list(self, tmp_path):
    path = tmp_path / 'many.json'
    path.write_text(json.dumps([{'age': 3}, {'age': 4}]))
    assert len(load_records(path)) == 2

  def test_json_scalar(self, tmp_path):
    path = tmp_path / 'bad.json'
    path.write_text('42')
    with pytest.raises(ValueError, match='expected a JSON object'):
      load_records(path)

  def test_csv_nulls(self, tmp_path):
    path = tmp_path / 'users.csv'
    path.write_text('age,nickname\n30,ace\n41,\n')
    records = load_records(path)
    assert records[0] == {'age': 30, 'nickname': 'ace'}
    assert records[1]['nickname'] is None

  def test_missing(self, tmp_path):
    with pytest.raises(FileNotFoundError):
      load_records(tmp_path / 'nope.csv')


class TestBuildRunner:
  """Tests for build_runner."""

  def test_one_check_per_record(self, user_rules):
    rule_set = RuleSet.from_dict(user_rules)
    runner = build_runner('users', [{'age': 1}, {'age': 'x'}], rule_set)
    assert not runner.run()
    assert [e.check_id for e in runner.failed_checks] == ['record[1]']


class TestMain:
  """Tests for the CLI entrypoint."""

  def test_valid_csv(self, tmp_path, rules_path, capsys):
    data = tmp_path / 'users.csv'
    data.write_text('age,nickname,status\n30,ace,active\n41,,active\n')
    assert main(['--rules', str(rules_path), '--data', str(data)]) == 0
    assert 'Checks: 2/2 passed' in capsys.readouterr().out

  def test_invalid_json(self, tmp_path, rules_path, capsys):
    data = tmp_path / 'users.json'
    data.write_text(json.dumps([{'age': 30}, {'age': 200, 'status': 'banned'}]))
    assert main(['--rules', str(rules_path), '--data', str(data)]) == 1
    out = capsys.readouterr().out
    assert '✗ FAIL record[1]' in out
    assert 'age: expected value to be value >= 0 and <= 130' in out

  def test_log_output(self, tmp_path, rules_path, caplog):
    caplog.set_level(logging.INFO)
    data = tmp_path / 'user.json'
    data.write_text(json.dumps({'age': 30}))
    assert main(['--rules', str(rules_path), '--data', str(data),
                 '--log']) == 0
    assert 'user.json: Checks: 1/1 passed' in caplog.text
