import functools


@functools.total_ordering
class OrderKey:
    _crasher = None
    comparisons = 0

    def __init__(self, order, name=None):
        self.order = order
        self.name = name

    def __repr__(self):
        return '<Key name:{} order:{}>'.format(self.name, self.order)

    def __eq__(self, other):
        if not isinstance(other, OrderKey):
            return NotImplemented
        return self.order == other.order

    def __lt__(self, other):
        if not isinstance(other, OrderKey):
            return NotImplemented

        if self._crasher is not None and self._crasher.error_on_cmp:
            raise CmpError
        OrderKey.comparisons += 1

        return self.order < other.order

    def __hash__(self):
        return hash(self.order)


class OrderKeyCrasher:

    def __init__(self, *, error_on_cmp=False):
        self.error_on_cmp = error_on_cmp

    def __enter__(self):
        if OrderKey._crasher is not None:
            raise RuntimeError('cannot nest crashers')
        OrderKey._crasher = self

    def __exit__(self, *exc):
        OrderKey._crasher = None


class ComparisonCounter:

    def __enter__(self):
        OrderKey.comparisons = 0
        return self

    def __exit__(self, *exc):
        pass

    @property
    def count(self):
        return OrderKey.comparisons


class CmpError(Exception):
    pass
