"""
Capability probes for host objects.

Values that fall through to the generic object tag are matched against an
ordered list of known external types; the first match names the tag. A probe
resolves its type lazily, so a library missing from the environment, or a
membership test that raises, counts as "no match" and the next probe is tried.

To add a probe:
  PROBE_REGISTRY['decimal_context'] = HostTypeProbe(
      'Context', 'decimal', 'Context')
"""
from dataclasses import dataclass
import importlib
import logging
from typing import Any, Iterable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostTypeProbe:
  """Membership test against one external type.

  Attributes:
    tag: Detail tag reported on a match (e.g. 'DataFrame')
    module: Dotted module path holding the type
    attr: Attribute name of the type inside the module
  """

  tag: str
  module: str
  attr: str

  def resolve(self) -> type:
    """Import and return the probed type."""
    return getattr(importlib.import_module(self.module), self.attr)

  def matches(self, value: Any) -> bool:
    """Return True if value is an instance of the probed type.

    Never raises: an import failure or a failing isinstance() is a miss.
    """
    try:
      return isinstance(value, self.resolve())
    except Exception as e:  # pylint: disable=broad-except
      logger.debug('probe %s.%s unavailable: %s: %s', self.module, self.attr,
                   type(e).__name__, e)
      return False


PROBE_REGISTRY: dict[str, HostTypeProbe] = {
    'dataframe': HostTypeProbe('DataFrame', 'pandas', 'DataFrame'),
    'series': HostTypeProbe('Series', 'pandas', 'Series'),
    'index': HostTypeProbe('Index', 'pandas', 'Index'),
    'ndarray': HostTypeProbe('ndarray', 'numpy', 'ndarray'),
    'path': HostTypeProbe('Path', 'pathlib', 'PurePath'),
    'uuid': HostTypeProbe('UUID', 'uuid', 'UUID'),
}

DEFAULT_PROBE_NAMES = ('dataframe', 'series', 'index', 'ndarray', 'path', 'uuid')


def probes_from_names(names: Iterable[str]) -> tuple[HostTypeProbe, ...]:
  """
  Look up probes by registry name, keeping the given order.

  Raises:
    KeyError: If a probe name is not found in the registry
  """
  probes = []
  for name in names:
    try:
      probes.append(PROBE_REGISTRY[name])
    except KeyError as e:
      raise KeyError(f"Unknown probe: '{name}'. "
                     f'Available: {list(PROBE_REGISTRY.keys())}') from e
  return tuple(probes)


def identify(value: Any, probes: Iterable[HostTypeProbe]) -> str | None:
  """Return the tag of the first matching probe, or None."""
  for probe in probes:
    if probe.matches(value):
      return probe.tag
  return None
