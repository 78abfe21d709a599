"""
Rule sets: checker chains described as data.

A rule set is JSON-friendly, so validation rules can live next to the data
they describe:

  {
    "config": {"label_template": "value #{n}"},
    "rules": [
      {"field": "age", "steps": [["required"], ["integer"], ["between", 0, 130]]},
      {"field": "nickname", "steps": [["optional"], ["string"], ["max_length", 20]]},
      {"field": "status", "steps": [["not"], ["one_of", ["banned"]]]}
    ]
  }

Each step is [name, *args]: a built-in predicate, a registered plugin
predicate, or "not" to invert the next step. Fields missing from a record are
checked as UNDEFINED.
"""

from dataclasses import dataclass
from dataclasses import field
import json
from pathlib import Path
from typing import Any, Mapping, Optional

from fluentcheck.checker.checker import check
from fluentcheck.checker.checker import Checker
from fluentcheck.config import CheckerConfig
from fluentcheck.domain.types import ValidationResult
from fluentcheck.introspect.detail import UNDEFINED

INVERT_STEP = 'not'


@dataclass
class FieldRule:
  """
  Chain of steps applied to one field of a record.

  Attributes:
    field: Record key to check
    steps: List of [name, *args] steps
    label: Label used in messages (defaults to field)

  Raises:
    ValueError: If a step is not a non-empty list starting with a name
  """
  field: str
  steps: list[list[Any]]
  label: Optional[str] = None

  def __post_init__(self):
    if not isinstance(self.steps, (list, tuple)):
      raise ValueError(f'Rule for {self.field!r}: steps must be a list')
    for step in self.steps:
      if (not isinstance(step, (list, tuple)) or not step or
          not isinstance(step[0], str)):
        raise ValueError(f'Rule for {self.field!r}: invalid step {step!r}, '
                         'expected [name, *args]')

  def apply(self, checker: Checker) -> Checker:
    """Run the steps against the checker's current subject."""
    for name, *args in self.steps:
      if name == INVERT_STEP:
        checker = checker.not_
      else:
        checker = checker.apply(name, *args)
    return checker

  def to_dict(self) -> dict[str, Any]:
    result: dict[str, Any] = {'field': self.field,
                              'steps': [list(s) for s in self.steps]}
    if self.label is not None:
      result['label'] = self.label
    return result


@dataclass
class RuleSet:
  """
  Ordered field rules plus the checker configuration they run with.

  Attributes:
    rules: FieldRules, applied in order
    config: CheckerConfig used to build each record's checker
  """
  rules: list[FieldRule] = field(default_factory=list)
  config: CheckerConfig = field(default_factory=CheckerConfig.default)

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return {
        'config': self.config.to_dict(),
        'rules': [r.to_dict() for r in self.rules],
    }

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'RuleSet':
    """
    Create from dictionary.

    Raises:
      ValueError: If 'rules' is missing or malformed
    """
    if 'rules' not in data or not isinstance(data['rules'], list):
      raise ValueError("Rule set must contain a 'rules' list")
    config = CheckerConfig.from_dict(data.get('config', {}))
    rules = [FieldRule(**r) for r in data['rules']]
    return cls(rules=rules, config=config)

  @classmethod
  def from_json(cls, json_str: str) -> 'RuleSet':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def from_file(cls, path: Path) -> 'RuleSet':
    """Load a rule set from a JSON file."""
    if not path.exists():
      raise FileNotFoundError(f'Rules file not found: {path}')
    return cls.from_json(path.read_text())


def validate_record(record: Mapping[str, Any],
                    rule_set: RuleSet) -> ValidationResult:
  """
  Validate one record: one checker, one subject per rule.

  Args:
    record: Mapping of field name to value
    rule_set: Rules to apply

  Returns:
    ValidationResult for the whole record
  """
  checker: Optional[Checker] = None
  for rule in rule_set.rules:
    value = record.get(rule.field, UNDEFINED)
    label = rule.label or rule.field
    if checker is None:
      checker = check(value, label, config=rule_set.config)
    else:
      checker.check(value, label)
    rule.apply(checker)

  if checker is None:
    return ValidationResult(ok=True)
  return checker.result()
