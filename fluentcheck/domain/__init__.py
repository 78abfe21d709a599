"""Domain types shared by the checker, the runner and the rule sets."""

from fluentcheck.domain.errors import InvalidArgumentError
from fluentcheck.domain.errors import ValidationError
from fluentcheck.domain.types import CheckDetail
from fluentcheck.domain.types import CheckRecord
from fluentcheck.domain.types import ERROR
from fluentcheck.domain.types import FAIL
from fluentcheck.domain.types import PASS
from fluentcheck.domain.types import SKIP
from fluentcheck.domain.types import ValidationResult

__all__ = [
    'CheckDetail',
    'CheckRecord',
    'ValidationResult',
    'InvalidArgumentError',
    'ValidationError',
    'PASS',
    'FAIL',
    'SKIP',
    'ERROR',
]
