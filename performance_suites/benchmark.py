import bisect
import timeit

import ordtree
import sortedcontainers


def dict_put(m, k, v):
    m[k] = v


def dict_rank(m, k):
    return bisect.bisect_left(sorted(m), k)


def dict_select(m, r):
    return sorted(m)[r]


def sorted_dict_select(m, r):
    return m.peekitem(r)[0]


implementations = (
    (
        'OrderedTreeMap',
        ordtree.OrderedTreeMap,
        ordtree.OrderedTreeMap.put,
        ordtree.OrderedTreeMap.rank,
        ordtree.OrderedTreeMap.select,
    ),
    (
        'SortedDict',
        sortedcontainers.SortedDict,
        sortedcontainers.SortedDict.__setitem__,
        sortedcontainers.SortedDict.bisect_left,
        sorted_dict_select,
    ),
    (
        'dict',
        dict,
        dict_put,
        dict_rank,  # Sorts the keys on every call!!
        dict_select,
    ),
)


# Keys are shuffled everywhere: the tree is not balanced, and sorted
# input would give it linear height.
SETUP = """
import random
random.seed(42)
values = list(range(data_size))
random.shuffle(values)
m = map((i, i) for i in values)
random.shuffle(values)
"""


print('Create empty:')
for iname, map, *_ in implementations:
    timer = timeit.Timer('map()', globals={'map': map})
    loop_count, seconds = timer.autorange()
    print('\t%s:\t%.2g' % (iname, seconds / loop_count))


tests = (
    ("Create", "map((i, i) for i in values)", SETUP),
    ("Random put to", "for i in values: put(m, i, -i)", SETUP),
    ("Rank in", "for i in values[:100]: rank(m, i)", SETUP),
    ("Select from", "for i in values[:100]: select(m, i)", SETUP),
    ("Iterate keys from", "for k in m: pass", SETUP),
)

for test_name, test, test_setup in tests:
    for dname, dsize in (('small', 10), ('medium', 2000), ('large', 100_000)):
        print(test_name, dname, ':')

        for iname, map, put, rank, select in implementations:
            timer = timeit.Timer(
                test,
                setup=test_setup,
                globals={
                    'map': map,
                    'put': put,
                    'rank': rank,
                    'select': select,
                    'data_name': dname,
                    'data_size': dsize,
                },
            )
            loop_count, seconds = timer.autorange()
            print('\t%s:\t%.2g' % (iname, seconds / loop_count))
