import logging
import operator
import os
import reprlib


__all__ = ('OrderedTreeMap', 'NOT_FOUND', 'InvariantError')


#
# Unbalanced binary search tree with cached subtree counts.
#
# Every node stores the number of nodes in the subtree it tops, which
# makes size() O(1) and rank()/select() O(height).  Mutations walk a
# single search path recursively and every parent re-links the child
# slot it descended into with whatever the recursive call returned;
# counts are then repaired on the way back up.  Deletion is Hibbard
# deletion: a node with two children is replaced by its in-order
# successor (the minimum of its right subtree).
#
# Nothing here rebalances the tree.  Sorted insertion produces a tree
# of linear height, and a long run of deletions skews the tree towards
# its left side.
#

_logger = logging.getLogger(__name__)

# Set ORDTREE_DEBUG=1 to validate the whole tree after every mutation.
DEBUG = os.environ.get('ORDTREE_DEBUG') == '1'


class _NotFound:

    __slots__ = ()

    def __repr__(self):
        return 'NOT_FOUND'

    def __bool__(self):
        return False

    def __reduce__(self):
        return 'NOT_FOUND'


NOT_FOUND = _NotFound()


class InvariantError(AssertionError):
    pass


W_NOT_FOUND, W_DELETED = range(2)


class Node:

    __slots__ = ('key', 'value', 'left', 'right', 'count')

    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.left = None
        self.right = None
        self.count = 1

    def __repr__(self):
        return '<Node {!r}: {!r} count:{}>'.format(
            self.key, self.value, self.count)


def _node_count(node):
    if node is None:
        return 0
    else:
        return node.count


def _node_resize(node):
    node.count = 1 + _node_count(node.left) + _node_count(node.right)
    return node


def _node_put(node, lt, key, value):
    if node is None:
        return Node(key, value)

    if lt(key, node.key):
        node.left = _node_put(node.left, lt, key, value)
    elif lt(node.key, key):
        node.right = _node_put(node.right, lt, key, value)
    else:
        # `key` is equal to `node.key`: overwrite, keep the shape.
        node.value = value

    return _node_resize(node)


def _node_rank(node, lt, key):
    if node is None:
        return 0

    if lt(key, node.key):
        return _node_rank(node.left, lt, key)

    if lt(node.key, key):
        # This node and everything to its left are smaller than `key`.
        return 1 + _node_count(node.left) + _node_rank(node.right, lt, key)

    return _node_count(node.left)


def _node_select(node, rank):
    if node is None:
        return None

    to_left = _node_count(node.left)

    if to_left > rank:
        return _node_select(node.left, rank)

    if to_left < rank:
        return _node_select(node.right, rank - to_left - 1)

    return node


def _node_delete_min(node):
    if node.left is None:
        return node.right

    node.left = _node_delete_min(node.left)
    return _node_resize(node)


def _node_delete(node, lt, key):
    if node is None:
        return W_NOT_FOUND, None

    if lt(key, node.key):
        res, node.left = _node_delete(node.left, lt, key)
    elif lt(node.key, key):
        res, node.right = _node_delete(node.right, lt, key)
    else:
        if node.right is None:
            return W_DELETED, node.left

        # _node_delete_min() consumes `right`, so both links of the
        # deleted node are taken before the successor is detached.
        left = node.left
        right = node.right

        node = _node_select(right, 0)
        node.right = _node_delete_min(right)
        node.left = left
        res = W_DELETED

    return res, _node_resize(node)


def _node_keys_in_order(node, out):
    if node is None:
        return

    _node_keys_in_order(node.left, out)
    out.append(node.key)
    _node_keys_in_order(node.right, out)


def _node_keys_pre_order(node, out):
    if node is None:
        return

    out.append(node.key)
    _node_keys_pre_order(node.left, out)
    _node_keys_pre_order(node.right, out)


def _node_keys_post_order(node, out):
    if node is None:
        return

    _node_keys_post_order(node.left, out)
    _node_keys_post_order(node.right, out)
    out.append(node.key)


def _node_items(node, out):
    if node is None:
        return

    _node_items(node.left, out)
    out.append((node.key, node.value))
    _node_items(node.right, out)


def _node_iter(node):
    if node is None:
        return

    yield from _node_iter(node.left)
    yield node.key
    yield from _node_iter(node.right)


def _node_height(node):
    if node is None:
        return 0

    return 1 + max(_node_height(node.left), _node_height(node.right))


def _node_validate(node, lt, low, high):
    # Returns the number of nodes under `node`; `low` and `high` are the
    # nearest ancestors whose keys bound this subtree (None: unbounded).
    if node is None:
        return 0

    if low is not None and not lt(low.key, node.key):
        raise InvariantError(
            'key {!r} is not greater than ancestor key {!r}'.format(
                node.key, low.key))

    if high is not None and not lt(node.key, high.key):
        raise InvariantError(
            'key {!r} is not less than ancestor key {!r}'.format(
                node.key, high.key))

    count = (1 +
             _node_validate(node.left, lt, low, node) +
             _node_validate(node.right, lt, node, high))

    if node.count != count:
        raise InvariantError(
            'node {!r} caches count {} but tops {} nodes'.format(
                node.key, node.count, count))

    return count


def _node_dump(node, buf, level, tag):  # pragma: no cover
    pad = '    ' * (level + 1)
    if node is None:
        buf.append('{}{}: None'.format(pad, tag))
        return

    buf.append('{}{}: Node(key={!r} value={!r} count={} id={:0x})'.format(
        pad, tag, node.key, node.value, node.count, id(node)))

    if node.left is not None or node.right is not None:
        _node_dump(node.left, buf, level + 1, 'L')
        _node_dump(node.right, buf, level + 1, 'R')


class OrderedTreeMap:

    def __init__(self, col=None, *, comparator=operator.lt):
        self.__root = None
        self.__lt = comparator

        if col is None:
            return

        if hasattr(col, 'items'):
            col = col.items()

        for key, value in col:
            self.put(key, value)

    @property
    def comparator(self):
        return self.__lt

    def __debug_validate(self, operation):
        _logger.debug('validating tree after %s()', operation)
        self.validate()

    def get(self, key, default=NOT_FOUND):
        lt = self.__lt
        node = self.__root

        while node is not None:
            if lt(key, node.key):
                node = node.left
            elif lt(node.key, key):
                node = node.right
            else:
                return node.value

        return default

    def put(self, key, value):
        self.__root = _node_put(self.__root, self.__lt, key, value)

        if DEBUG:
            self.__debug_validate('put')

    def delete(self, key):
        res, self.__root = _node_delete(self.__root, self.__lt, key)

        if res is W_NOT_FOUND:
            _logger.debug('delete(%r): no such key', key)

        if DEBUG:
            self.__debug_validate('delete')

        return res is W_DELETED

    def size(self):
        return _node_count(self.__root)

    def rank(self, key):
        return _node_rank(self.__root, self.__lt, key)

    def select(self, rank):
        if rank < 0:
            return NOT_FOUND

        size = self.size()
        if rank > size:
            return NOT_FOUND

        node = _node_select(self.__root, rank)
        if node is None:
            # rank == size passes the bound check above, but no node
            # has that many keys before it.
            _logger.debug('select(%d): no key at rank %d in a tree of %d',
                          rank, rank, size)
            return NOT_FOUND

        return node.key

    def keys_in_order(self, out=None):
        if out is None:
            out = []
        _node_keys_in_order(self.__root, out)
        return out

    def keys_pre_order(self, out=None):
        if out is None:
            out = []
        _node_keys_pre_order(self.__root, out)
        return out

    def keys_post_order(self, out=None):
        if out is None:
            out = []
        _node_keys_post_order(self.__root, out)
        return out

    def items(self):
        out = []
        _node_items(self.__root, out)
        return out

    def values(self):
        return [value for _, value in self.items()]

    def min(self):
        if self.__root is None:
            return NOT_FOUND
        return self.select(0)

    def max(self):
        node = self.__root
        if node is None:
            return NOT_FOUND

        while node.right is not None:
            node = node.right
        return node.key

    def height(self):
        return _node_height(self.__root)

    def clear(self):
        self.__root = None

    def validate(self):
        _node_validate(self.__root, self.__lt, None, None)

    def __len__(self):
        return _node_count(self.__root)

    def __iter__(self):
        yield from _node_iter(self.__root)

    def __contains__(self, key):
        return self.get(key) is not NOT_FOUND

    def __getitem__(self, key):
        value = self.get(key)
        if value is NOT_FOUND:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        if not self.delete(key):
            raise KeyError(key)

    @reprlib.recursive_repr("{...}")
    def __repr__(self):
        items = []
        for key, val in self.items():
            items.append("{!r}: {!r}".format(key, val))
        return '<ordtree.OrderedTreeMap({{{}}}) at 0x{:0x}>'.format(
            ', '.join(items), id(self))

    def __dump__(self):  # pragma: no cover
        buf = ['OrderedTreeMap(size={} height={}):'.format(
            self.size(), self.height())]
        _node_dump(self.__root, buf, 0, 'root')
        return '\n'.join(buf)
