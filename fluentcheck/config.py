"""
Checker configuration.

CheckerConfig is a serializable (JSON-friendly) description of how checkers
are built: the label used for unnamed subjects and which host type probes
refine generic objects, by registry name.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import field
import json
from typing import Any

from fluentcheck.introspect.detail import TypeIntrospector
from fluentcheck.introspect.probes import DEFAULT_PROBE_NAMES
from fluentcheck.introspect.probes import probes_from_names

DEFAULT_LABEL_TEMPLATE = 'value #{n}'


@dataclass
class CheckerConfig:
  """
  Configuration for building checkers.

  Attributes:
    name: Human-readable configuration name
    label_template: Label for unnamed subjects; {n} is the 1-based subject
      count of the checker
    probes: Host type probe names (see PROBE_REGISTRY), tried in order
  """
  name: str = 'default'
  label_template: str = DEFAULT_LABEL_TEMPLATE
  probes: list[str] = field(default_factory=lambda: list(DEFAULT_PROBE_NAMES))

  @classmethod
  def default(cls) -> 'CheckerConfig':
    """All probes, 'value #N' labels."""
    return cls()

  @classmethod
  def stdlib_only(cls) -> 'CheckerConfig':
    """Probe standard library types only."""
    return cls(name='stdlib_only', probes=['path', 'uuid'])

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'CheckerConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'CheckerConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))


def create_introspector(config: CheckerConfig) -> TypeIntrospector:
  """
  Build a TypeIntrospector from the configured probe names.

  Raises:
    KeyError: If a probe name is not found in the registry
  """
  return TypeIntrospector(probes_from_names(config.probes))
