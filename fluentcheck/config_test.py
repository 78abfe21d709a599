import pandas as pd
import pytest

from fluentcheck.config import CheckerConfig
from fluentcheck.config import create_introspector
from fluentcheck.introspect.probes import DEFAULT_PROBE_NAMES


class TestCheckerConfig:
  """Tests for CheckerConfig."""

  def test_default(self):
    config = CheckerConfig.default()
    assert config.label_template == 'value #{n}'
    assert config.probes == list(DEFAULT_PROBE_NAMES)

  def test_json_round_trip(self):
    config = CheckerConfig(name='custom',
                           label_template='arg {n}',
                           probes=['uuid'])
    restored = CheckerConfig.from_json(config.to_json())
    assert restored == config

  def test_from_dict_partial(self):
    config = CheckerConfig.from_dict({'label_template': 'x{n}'})
    assert config.name == 'default'
    assert config.label_template == 'x{n}'

  def test_from_dict_unknown_key(self):
    with pytest.raises(TypeError):
      CheckerConfig.from_dict({'colour': 'red'})


class TestCreateIntrospector:
  """Tests for create_introspector."""

  def test_default_probes(self):
    introspector = create_introspector(CheckerConfig.default())
    assert introspector.detail_type_of(pd.Series([1])) == 'object (Series)'

  def test_stdlib_only(self):
    introspector = create_introspector(CheckerConfig.stdlib_only())
    assert [p.tag for p in introspector.probes] == ['Path', 'UUID']
    assert introspector.detail_type_of(pd.Series([1])) == 'object (Object)'

  def test_unknown_probe(self):
    with pytest.raises(KeyError, match="Unknown probe: 'frame'"):
      create_introspector(CheckerConfig(probes=['frame']))
