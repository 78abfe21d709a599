"""
DataFrame predicates.

Registered as plugin predicates, reachable with Checker.apply() or from rule
files:

  check(facts, 'facts').apply('columns', ['ticker', 'end']) \\
      .apply('unique_by', ['ticker', 'end']) \\
      .apply('not_null', ['ticker']).ok()

A subject that is not a DataFrame fails these predicates.
"""
from typing import Any, Optional, Sequence, TYPE_CHECKING

import pandas as pd

from fluentcheck.domain.types import CheckDetail
from fluentcheck.predicates.registry import register_predicate

if TYPE_CHECKING:
  from fluentcheck.checker.checker import Checker

_SAMPLE_ROWS = 5


def _frame(checker: 'Checker') -> Optional[pd.DataFrame]:
  value = checker.value
  return value if isinstance(value, pd.DataFrame) else None


def _missing(df: pd.DataFrame, names: Sequence[Any]) -> list[Any]:
  return [c for c in names if c not in df.columns]


@register_predicate('columns')
def columns(checker: 'Checker', names: Sequence[str]) -> 'Checker':
  """Subject is a DataFrame holding every named column."""
  names = list(names)
  detail = CheckDetail(predicate='columns',
                       expected=f'DataFrame with columns {names}',
                       actual=checker.detail_type)

  def predicate() -> bool:
    df = _frame(checker)
    if df is None:
      return False
    missing = _missing(df, names)
    detail.actual = f'missing columns {missing}' if missing else names
    return not missing

  return checker.run(detail, predicate)


@register_predicate('unique_by')
def unique_by(checker: 'Checker', keys: Sequence[str]) -> 'Checker':
  """Rows are unique by the key columns."""
  keys = list(keys)
  detail = CheckDetail(predicate='unique_by',
                       expected=f'rows unique by {keys}',
                       actual=checker.detail_type)

  def predicate() -> bool:
    df = _frame(checker)
    if df is None:
      return False
    missing = _missing(df, keys)
    if missing:
      detail.message = f'key columns missing: {missing}'
      return False

    dup_mask = df.duplicated(keys, keep=False)
    dup_count = int(dup_mask.sum())
    if dup_count > 0:
      sample = df.loc[dup_mask, keys].head(_SAMPLE_ROWS).to_dict(
          orient='records')
      detail.actual = f'{dup_count} duplicate rows, sample: {sample}'
    else:
      detail.actual = 'no duplicates'
    return dup_count == 0

  return checker.run(detail, predicate)


@register_predicate('not_null')
def not_null(checker: 'Checker', names: Sequence[str]) -> 'Checker':
  """No null values in the named columns."""
  names = list(names)
  detail = CheckDetail(predicate='not_null',
                       expected=f'no nulls in {names}',
                       actual=checker.detail_type)

  def predicate() -> bool:
    df = _frame(checker)
    if df is None:
      return False
    missing = _missing(df, names)
    if missing:
      detail.message = f'columns missing: {missing}'
      return False

    null_counts = {c: int(df[c].isna().sum()) for c in names}
    violations = {c: n for c, n in null_counts.items() if n > 0}
    detail.actual = f'nulls {violations}' if violations else 'no nulls'
    return not violations

  return checker.run(detail, predicate)


@register_predicate('non_negative')
def non_negative(checker: 'Checker', column: str) -> 'Checker':
  """Every non-null value in column is >= 0."""
  detail = CheckDetail(predicate='non_negative',
                       expected=f'{column} >= 0',
                       actual=checker.detail_type)

  def predicate() -> bool:
    df = _frame(checker)
    if df is None:
      return False
    if column not in df.columns:
      detail.message = f'column {column} not found'
      return False

    bad_mask = (df[column] < 0) & df[column].notna()
    bad_count = int(bad_mask.sum())
    detail.actual = f'{bad_count} negative rows'
    return bad_count == 0

  return checker.run(detail, predicate)
