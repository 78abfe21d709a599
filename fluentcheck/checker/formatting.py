"""Error message formatting for failed checks."""
from fluentcheck.domain.types import CheckRecord

DEFAULT_TEMPLATE = ('{name}: expected value to {prefix}be {expected}, '
                    'received {actual}')

TEMPLATES: dict[str, str] = {
    'required': '{name}: expected a required value, received {actual}',
    'type': '{name}: expected type to {prefix}be {expected}, received {actual}',
    'type_detail': ('{name}: expected detailed type to {prefix}be {expected}, '
                    'received {actual}'),
    'truthy': ('{name}: expected value to {prefix}be {predicate}, '
               'received {actual}'),
    'falsy': ('{name}: expected value to {prefix}be {predicate}, '
              'received {actual}'),
}


def format_error(record: CheckRecord) -> str:
  """
  Build the error message for a failed record.

  An explicit message wins over the predicate's template; predicates without
  a template use DEFAULT_TEMPLATE.
  """
  if isinstance(record.message, str):
    return f'{record.name}: {record.message}'

  template = TEMPLATES.get(record.predicate, DEFAULT_TEMPLATE)
  return template.format(
      name=record.name,
      prefix='NOT ' if record.invert else '',
      expected=record.expected,
      actual=record.actual,
      predicate=record.predicate,
  )
