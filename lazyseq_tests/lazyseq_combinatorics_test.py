import math
import time
import suite
from lazyseq import (
    S, from_range, count_from, empty, combinations, permutations, cross, InfiniteSequenceError,
    SequenceConsumedError
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
raises = suite.raises

numeric_list = [10, 20, 30, 40]


# --- combinations tests ---

@test("combinations enumerate k-subsets in increasing index order")
def test_combinations_order():
    expected = [(10, 20), (10, 30), (10, 40), (20, 30), (20, 40), (30, 40)]
    assert_equal(S(numeric_list).comb.combinations(2).to.list(), expected, "lexicographic index order")


@test("combinations edge sizes")
def test_combinations_edges():
    assert_equal(S(numeric_list).comb.combinations(0).to.list(), [()], "k=0 gives one empty combination")
    assert_equal(S(numeric_list).comb.combinations(5).to.list(), [], "k > n gives nothing")
    assert_equal(S(numeric_list).comb.combinations(-1).to.list(), [], "negative k gives nothing")
    assert_equal(empty().comb.combinations(0).to.list(), [()], "empty input, k=0")


@test("combinations over a range concatenate sizes in increasing order")
def test_combinations_range():
    assert_equal(S('abc').comb.combinations(range(1, 3)).to.list(),
                 [('a',), ('b',), ('c',), ('a', 'b'), ('a', 'c'), ('b', 'c')], "sizes 1 then 2")
    assert_equal(S('ab').comb.combinations(range(0, 10)).to.count(), 4, "sizes past n are skipped")
    assert_equal(S('abc').comb.combinations().to.count(), 8, "no argument is the power set")
    assert_equal(S([1, 2, 3]).comb.combinations(range(2, -1, -1)).to.list(),
                 [(), (1,), (2,), (3,), (1, 2), (1, 3), (2, 3)], "descending range still runs smallest size first")


@test("integer-count combinations match the binomial coefficient")
def test_combinations_count_property():
    for n in range(0, 7):
        for k in range(0, n + 2):
            combos = combinations(n, k).to.list()
            assert_equal(len(combos), math.comb(n, k), f"C({n},{k})")
            assert_that(all(list(c) == sorted(set(c)) for c in combos), "strictly increasing indexes")
            assert_equal(len(set(combos)), len(combos), "no duplicates")


@test("combinations refuse infinite input")
def test_combinations_infinite():
    with raises(InfiniteSequenceError):
        count_from(0).comb.combinations(2)


# --- permutations tests ---

@test("permutations of range(n) are n! distinct orderings in lexicographic order")
def test_permutations_property():
    for n in range(0, 6):
        perms = permutations(n).to.list()
        assert_equal(len(perms), math.factorial(n), f"{n}!")
        assert_equal(len(set(perms)), len(perms), "distinct")
        assert_that(all(sorted(p) == list(range(n)) for p in perms), "each is an ordering of range(n)")
        assert_equal(perms, sorted(perms), "lexicographic order")


@test("permutations treat equal values at different positions as distinct")
def test_permutations_duplicates():
    assert_equal(S(['x', 'x']).comb.permutations().to.list(), [('x', 'x'), ('x', 'x')], "duplicate orderings")
    perms = S([1, 1, 2]).comb.permutations()
    assert_equal(perms.to.count(), 6, "3! even with repeats")
    assert_equal(perms.to.count((1, 1, 2)), 2, "(1, 1, 2) appears twice")


@test("permutations with a length")
def test_permutations_r():
    assert_equal(S('abc').comb.permutations(2).to.count(), 6, "3!/1!")
    assert_equal(S('abc').comb.permutations(4).to.list(), [], "r > n")
    assert_equal(S('abc').comb.permutations(-1).to.list(), [], "negative r")
    assert_equal(S('abc').comb.permutations(0).to.list(), [()], "r=0")


# --- cross tests ---

@test("cross builds the cartesian product")
def test_cross():
    assert_equal(S([1, 2]).comb.cross('ab').to.list(), [(1, 'a'), (1, 'b'), (2, 'a'), (2, 'b')], "product")
    assert_equal(cross([1], [2], [3, 4]).to.list(), [(1, 2, 3), (1, 2, 4)], "three inputs")
    with raises(InfiniteSequenceError):
        cross([1], count_from(0))
    once = cross([1, 2], iter("ab"))
    assert_equal(once.to.list(), [(1, "a"), (1, "b"), (2, "a"), (2, "b")], "iterator input")
    with raises(SequenceConsumedError):
        once.to.list()


@test("combinatorics performance benchmarks")
def test_combinatorics_performance():
    start = time.perf_counter()
    comb_count = from_range(0, 25).comb.combinations(5).to.count()  # 25c5 = 53,130
    duration = (time.perf_counter() - start) * 1000
    print(f"    {suite._c.grey}└─> combinations on 25c5 ({comb_count:,} results) took: {duration:.2f}ms{suite._c.reset}")
    assert_equal(comb_count, 53130, "25 choose 5")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="lazyseq combinatorics test")
