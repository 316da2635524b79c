import operator
import suite
from lazyseq import S, count_from, empty, zip_, roundrobin, SequenceConsumedError

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
raises = suite.raises


# --- zip tests ---

@test("zip stops at the shortest input")
def test_zip_shortest():
    assert_equal(zip_([1, 2, 3], [4, 5]).to.list(), [(1, 4), (2, 5)], "two pairs")
    assert_equal(S([1, 2, 3]).zip.zip([4, 5]).to.list(), [(1, 4), (2, 5)], "accessor form")
    assert_equal(zip_([1, 2], [3, 4], [5, 6]).to.list(), [(1, 3, 5), (2, 4, 6)], "three inputs")


@test("zip of zero inputs is empty")
def test_zip_empty():
    assert_equal(zip_().to.list(), [], "no inputs")
    assert_equal(zip_([1, 2], []).to.list(), [], "one empty input")


@test("zip combines rows with a function")
def test_zip_with():
    assert_equal(S([1, 2]).zip.zip([10, 20], with_=operator.add).to.list(), [11, 22], "sums")
    assert_equal(zip_('ab', 'cd', with_=lambda *xs: ''.join(xs)).to.list(), ['ac', 'bd'], "joined")


@test("zip with infinite inputs")
def test_zip_infinite():
    labelled = S(['a', 'b']).zip.zip(count_from(1))
    assert_that(not labelled.is_infinite, "a finite input bounds the zip")
    assert_equal(labelled.to.list(), [('a', 1), ('b', 2)], "numbered")
    both = zip_(count_from(0), count_from(100))
    assert_that(both.is_infinite, "all-infinite zip is infinite")
    assert_equal(both.head(2).to.list(), [(0, 100), (1, 101)], "prefix")


# --- roundrobin tests ---

@test("roundrobin continues past the shortest input")
def test_roundrobin_basic():
    assert_equal(roundrobin([1, 2, 3], [4, 5]).to.list(), [1, 4, 2, 5, 3], "interleaved")
    assert_equal(S([1, 2, 3]).zip.roundrobin([4, 5]).to.list(), [1, 4, 2, 5, 3], "accessor form")


@test("roundrobin skips exhausted inputs")
def test_roundrobin_exhausted():
    assert_equal(roundrobin([], [1, 2]).to.list(), [1, 2], "empty first input")
    assert_equal(roundrobin([1], [2, 3, 4], [5, 6]).to.list(), [1, 2, 5, 3, 6, 4], "uneven")
    assert_equal(roundrobin().to.list(), [], "no inputs")


@test("roundrobin can report rounds")
def test_roundrobin_rounds():
    assert_equal(roundrobin([1, 2, 3], [4, 5], rounds=True).to.list(), [(1, 4), (2, 5), (3,)], "one tuple per round")


@test("roundrobin with an infinite input is infinite")
def test_roundrobin_infinite():
    mixed = roundrobin(['x'], count_from(0))
    assert_that(mixed.is_infinite, "infinite flag")
    assert_equal(mixed.head(4).to.list(), ['x', 0, 1, 2], "finite input drops out")


@test("zip over a bare iterator can only be walked once")
def test_zip_single_pass_input():
    pairs = S([1, 2]).zip.zip(iter([3, 4]))
    assert_equal(pairs.to.list(), [(1, 3), (2, 4)], "first pass")
    with raises(SequenceConsumedError):
        pairs.to.list()

    mixed = roundrobin([1, 2], (x for x in [3, 4]))
    assert_equal(mixed.to.list(), [1, 3, 2, 4], "roundrobin first pass")
    with raises(SequenceConsumedError):
        mixed.to.list()

    pairs = zip_([5], iter([6]))
    assert_equal(pairs.to.list(), [(5, 6)], "function form")
    with raises(SequenceConsumedError):
        pairs.to.list()

# --- run the suite ---
if __name__ == "__main__":
    suite.run(title="lazyseq zip test")
