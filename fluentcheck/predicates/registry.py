"""
Registry of named plugin predicates.

The built-in predicates are Checker methods. Anything else (checks bound to a
particular data source, DataFrame checks, project-specific rules) is written
as a plain function and registered here, which makes it reachable through
Checker.apply() and from rule files.

A plugin predicate takes the checker first and funnels its evaluation through
Checker.run() so that inversion, abort and skip behave as for built-ins:

  @register_predicate('even')
  def even(checker):
    return checker.run(
        CheckDetail(predicate='even', expected='even', actual=checker.value),
        lambda: checker.value % 2 == 0)

  check(4, 'n').apply('even').ok()  # True
"""
from collections.abc import Callable
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
  from fluentcheck.checker.checker import Checker

PredicateFn = Callable[..., 'Checker']

PREDICATES: dict[str, PredicateFn] = {}


def register_predicate(name: str,
                       *,
                       replace: bool = False) -> Callable[[PredicateFn],
                                                          PredicateFn]:
  """
  Decorator registering fn under name.

  Raises:
    KeyError: If name is already registered and replace is False
  """

  def decorator(fn: PredicateFn) -> PredicateFn:
    if name in PREDICATES and not replace:
      raise KeyError(f"Predicate already registered: '{name}'")
    PREDICATES[name] = fn
    return fn

  return decorator


def unregister_predicate(name: str) -> None:
  PREDICATES.pop(name, None)


def get_predicate(name: str) -> PredicateFn:
  """
  Look up a registered predicate.

  Raises:
    KeyError: If name is not registered
  """
  try:
    return PREDICATES[name]
  except KeyError as e:
    raise KeyError(f"Unknown predicate: '{name}'. "
                   f'Available: {list_predicates()}') from e


def list_predicates() -> list[str]:
  return sorted(PREDICATES)


def apply_predicate(checker: 'Checker', name: str, *args: Any,
                    **kwargs: Any) -> 'Checker':
  return get_predicate(name)(checker, *args, **kwargs)
