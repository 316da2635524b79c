import suite
from lazyseq import (
    S, from_function, count_from, empty, NIL, WHATEVER, configure, reset_config,
    SequenceConsumedError, InfiniteSequenceError
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
raises = suite.raises

source = list(range(10))


# --- pick tests ---

@test("pick without a count returns one element or NIL")
def test_pick_single():
    assert_that(S(source).util.pick(seed=1) in source, "picked from the source")
    assert_that(empty().util.pick() is NIL, "empty gives NIL")


@test("pick samples without replacement")
def test_pick_many():
    picked = S(source).util.pick(4, seed=5).to.list()
    assert_equal(len(picked), 4, "four elements")
    assert_equal(len(set(picked)), 4, "no repeats")
    assert_that(set(picked) <= set(source), "all from the source")
    assert_equal(S([1, 2, 3]).util.pick(10, seed=5).to.count(), 3, "never more than the source holds")


@test("pick with * shuffles everything")
def test_pick_whatever():
    shuffled = S(source).util.pick(WHATEVER, seed=9).to.list()
    assert_equal(sorted(shuffled), source, "a permutation of the source")


@test("seeded picks replay identically")
def test_pick_seeded():
    picks = S(source).util.pick(5, seed=42)
    assert_equal(picks.to.list(), picks.to.list(), "same sequence on every pass")
    assert_equal(picks.to.list(), S(source).util.pick(5, seed=42).to.list(), "same seed, same picks")
    configure(default_seed=42)
    try:
        assert_equal(S(source).util.pick(5).to.list(), picks.to.list(), "configured default seed")
    finally:
        reset_config()


@test("pick and roll refuse infinite input")
def test_pick_infinite():
    with raises(InfiniteSequenceError):
        count_from(0).util.pick(2)
    with raises(InfiniteSequenceError):
        count_from(0).util.roll()
    with raises(ValueError):
        S(source).util.pick('some')


# --- roll tests ---

@test("roll samples with replacement")
def test_roll_many():
    rolled = S([1, 2]).util.roll(50, seed=3).to.list()
    assert_equal(len(rolled), 50, "fifty rolls")
    assert_that(set(rolled) <= {1, 2}, "values from the source")
    assert_that(S([7]).util.roll(seed=1) == 7, "single roll")
    assert_that(empty().util.roll() is NIL, "empty gives NIL")


@test("roll with * is an endless lazy stream")
def test_roll_whatever():
    dice = S(range(1, 7)).util.roll(WHATEVER, seed=8)
    assert_that(dice.is_infinite, "infinite flag")
    throws = dice.head(100).to.list()
    assert_equal(len(throws), 100, "a hundred throws")
    assert_that(all(1 <= t <= 6 for t in throws), "valid faces")
    assert_equal(empty().util.roll(WHATEVER).head(5).to.list(), [], "nothing to roll")


# --- cache tests ---

@test("single-pass sequences refuse a second iteration")
def test_single_pass():
    once = S(iter([1, 2, 3]))
    assert_that(not once.is_restartable, "iterator-backed sequence")
    assert_equal(list(once), [1, 2, 3], "first pass")
    with raises(SequenceConsumedError):
        list(once)


@test("cache makes a single-pass sequence restartable")
def test_cache_restartable():
    cached = S(iter([1, 2, 3])).util.cache()
    assert_equal(cached.to.list(), [1, 2, 3], "first pass")
    assert_equal(cached.to.list(), [1, 2, 3], "second pass")
    assert_equal(cached.map(lambda x: x * 2).to.list(), [2, 4, 6], "derived sequences replay too")


@test("cache pulls each element from the source at most once")
def test_cache_pulls_once():
    pulls = []
    counted = from_function(lambda: (pulls.append(x) or x for x in range(3)))
    cached = counted.util.cache()
    cached.to.list()
    cached.to.list()
    assert_equal(pulls, [0, 1, 2], "source walked once")


@test("cache over an infinite sequence fills on demand")
def test_cache_infinite():
    pulled = []
    cached = count_from(0).util.peek(pulled.append).util.cache()
    assert_that(cached.is_infinite, "still infinite")
    assert_equal(cached.head(3).to.list(), [0, 1, 2], "first prefix")
    assert_equal(cached.head(5).to.list(), [0, 1, 2, 3, 4], "longer prefix")
    assert_equal(pulled, [0, 1, 2, 3, 4], "each element pulled once")


# --- peek / pipe tests ---

@test("peek observes elements without changing them")
def test_peek():
    seen = []
    result = S([1, 2, 3]).util.peek(seen.append).map(lambda x: x + 1)
    assert_equal(seen, [], "lazy until iterated")
    assert_equal(result.to.list(), [2, 3, 4], "values unchanged by peek")
    assert_equal(seen, [1, 2, 3], "every element observed")


@test("pipe hands the sequence to a function")
def test_pipe():
    def summarize(seq, label):
        return f"{label}: {seq.to.count()}"
    assert_equal(S(source).util.pipe(summarize, label='items'), 'items: 10', "piped")


# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="lazyseq utility test")
