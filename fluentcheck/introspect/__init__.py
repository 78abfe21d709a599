"""Coarse and detail type introspection."""

from fluentcheck.introspect.detail import coarse_type_of
from fluentcheck.introspect.detail import default_introspector
from fluentcheck.introspect.detail import detail_type_of
from fluentcheck.introspect.detail import is_nil
from fluentcheck.introspect.detail import is_plain_structure
from fluentcheck.introspect.detail import number_type
from fluentcheck.introspect.detail import TypeIntrospector
from fluentcheck.introspect.detail import UNDEFINED
from fluentcheck.introspect.probes import HostTypeProbe
from fluentcheck.introspect.probes import PROBE_REGISTRY

__all__ = [
    'TypeIntrospector',
    'HostTypeProbe',
    'PROBE_REGISTRY',
    'UNDEFINED',
    'coarse_type_of',
    'detail_type_of',
    'default_introspector',
    'is_nil',
    'is_plain_structure',
    'number_type',
]
