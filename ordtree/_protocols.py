import sys
from typing import Any
from typing import Iterable
from typing import Tuple
from typing import TypeVar

if sys.version_info >= (3, 8):
    from typing import Protocol
else:
    from typing_extensions import Protocol

KT = TypeVar('KT')
KT_co = TypeVar('KT_co', covariant=True)
KT_contra = TypeVar('KT_contra', contravariant=True)
SK = TypeVar('SK', bound='KeySink[Any]')
T = TypeVar('T')
VT = TypeVar('VT')
VT_co = TypeVar('VT_co', covariant=True)


class SupportsLessThan(Protocol):
    def __lt__(self, __other: Any) -> bool: ...


class Comparator(Protocol[KT_contra]):
    def __call__(self, __a: KT_contra, __b: KT_contra) -> bool: ...


class KeySink(Protocol[KT_contra]):
    def append(self, __key: KT_contra) -> Any: ...


class IterableItems(Protocol[KT_co, VT_co]):
    def items(self) -> Iterable[Tuple[KT_co, VT_co]]: ...
