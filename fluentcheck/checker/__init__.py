"""The fluent Checker and its factory."""

from fluentcheck.checker.checker import BUILTIN_PREDICATES
from fluentcheck.checker.checker import check
from fluentcheck.checker.checker import Checker
from fluentcheck.checker.formatting import format_error

__all__ = ['BUILTIN_PREDICATES', 'Checker', 'check', 'format_error']
