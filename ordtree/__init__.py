# flake8: noqa

from .tree import OrderedTreeMap
from .tree import NOT_FOUND
from .tree import InvariantError

from ._protocols import Comparator as Comparator
from ._protocols import KeySink as KeySink
from ._protocols import SupportsLessThan as SupportsLessThan

from ._version import __version__

__all__ = 'OrderedTreeMap', 'NOT_FOUND', 'InvariantError'
