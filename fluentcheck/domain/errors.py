"""Exceptions raised by the checker API."""


class InvalidArgumentError(TypeError):
  """The caller misused the API (bad callback, bad membership list, ...).

  Raised synchronously from the offending call and never recorded as a check.
  """


class ValidationError(TypeError):
  """Raised by Checker.guard() when the chain recorded failures.

  Attributes:
    result: ValidationResult snapshot taken when guard() was called
  """

  def __init__(self, result):
    super().__init__('\n'.join(result.errors))
    self.result = result

  @property
  def errors(self) -> tuple[str, ...]:
    return self.result.errors
