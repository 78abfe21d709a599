import pandas as pd
import pytest


@pytest.fixture
def facts_frame() -> pd.DataFrame:
  """Small frame with a unique key and no nulls."""
  return pd.DataFrame({
      'ticker': ['AAPL', 'AAPL', 'MSFT'],
      'end': pd.to_datetime(['2023-03-31', '2023-06-30', '2023-03-31']),
      'value': [100.0, 110.0, 50.0],
  })


@pytest.fixture
def user_rules() -> dict:
  """Rule set used by the rules and CLI tests."""
  return {
      'config': {
          'label_template': 'value #{n}'
      },
      'rules': [
          {
              'field': 'age',
              'steps': [['required'], ['integer'], ['between', 0, 130]],
          },
          {
              'field': 'nickname',
              'steps': [['optional'], ['string'], ['max_length', 10]],
          },
          {
              'field': 'status',
              'label': 'account status',
              'steps': [['not'], ['one_of', ['banned']]],
          },
      ],
  }
