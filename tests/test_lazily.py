#!/usr/bin/env python3
"""
Tests for the lazy combinators and the Sequence they return.
"""

import unittest

from seqfunk import (
    ExhaustedError, InvalidArgument, NullArgument, SeqFunkConfig, Sequence,
    Pair, Triple, Nonuple, integers, lazily, none, some,
)


class ExplodingIterable:
    """Iterable that fails as soon as anyone tries to read it."""

    def __iter__(self):
        raise RuntimeError("source was opened")


class CountingIterable:
    """Re-iterable source that records how often it is opened and read."""

    def __init__(self, values):
        self.values = list(values)
        self.opened = 0
        self.pulled = 0

    def __iter__(self):
        self.opened += 1
        for value in self.values:
            self.pulled += 1
            yield value


def is_even(n):
    return n % 2 == 0


class TestLaziness(unittest.TestCase):
    """Combinators must not touch their sources until iterated."""

    def setUp(self):
        SeqFunkConfig.reset()

    def test_construction_never_opens_source(self):
        """Every combinator can be built over a source that cannot be read."""
        source = ExplodingIterable()
        built = [
            lazily.batch(source, 2),
            lazily.cycle(source),
            lazily.repeat(source, 3),
            lazily.concat([1], source),
            lazily.drop(source, 1),
            lazily.drop_while(source, is_even),
            lazily.drop_until(source, is_even),
            lazily.take(source, 5),
            lazily.take_while(source, is_even),
            lazily.take_until(source, is_even),
            lazily.slice(source, 1, 4),
            lazily.rest(source),
            lazily.map(source, str),
            lazily.filter(source, is_even),
            lazily.reject(source, is_even),
            lazily.each(source, print),
            lazily.enumerate(source),
            lazily.index(source, str),
            lazily.equate(source, [1], lambda a, b: a == b),
            lazily.zip(source, [1]),
            lazily.zip([1], source, [2]),
            lazily.cartesian_product(source, [1]),
            lazily.cartesian_product([1], source),
        ]
        built.extend(lazily.partition(source, is_even))

        for sequence in built:
            with self.assertRaises(RuntimeError):
                list(sequence)

    def test_chain_does_not_materialize(self):
        source = CountingIterable(range(100))
        pipeline = lazily.take(lazily.filter(lazily.map(source, lambda n: n * 3), is_even), 2)
        self.assertEqual(source.opened, 0)
        self.assertEqual(list(pipeline), [0, 6])
        self.assertEqual(source.pulled, 3)

    def test_infinite_pipeline(self):
        squares = lazily.map(integers(), lambda n: n * n)
        self.assertEqual(list(lazily.take(lazily.filter(squares, is_even), 4)), [0, 4, 16, 36])

    def test_each_runs_effects_on_pull(self):
        seen = []
        sequence = lazily.each([1, 2, 3], seen.append)
        self.assertEqual(seen, [])

        cursor = iter(sequence)
        self.assertEqual(cursor.next(), 1)
        self.assertEqual(seen, [1])
        self.assertEqual(list(cursor), [2, 3])
        self.assertEqual(seen, [1, 2, 3])


class TestRestartability(unittest.TestCase):
    """Sequences re-run their transformations on every iteration."""

    def test_reiteration_gives_same_elements(self):
        doubled = lazily.map([1, 2, 3], lambda n: n * 2)
        self.assertEqual(list(doubled), [2, 4, 6])
        self.assertEqual(list(doubled), [2, 4, 6])

    def test_cursors_are_independent(self):
        sequence = lazily.drop([10, 20, 30, 40], 1)
        first = iter(sequence)
        second = iter(sequence)
        self.assertEqual(first.next(), 20)
        self.assertEqual(first.next(), 30)
        self.assertEqual(second.next(), 20)
        self.assertEqual(list(first), [40])
        self.assertEqual(list(second), [30, 40])

    def test_exhausted_cursor_keeps_raising(self):
        cursor = iter(lazily.take([1, 2], 1))
        self.assertEqual(cursor.next(), 1)
        self.assertRaises(ExhaustedError, cursor.next)
        self.assertRaises(ExhaustedError, cursor.next)

    def test_generator_source_is_single_pass(self):
        sequence = Sequence(n for n in range(3))
        self.assertEqual(list(sequence), [0, 1, 2])
        self.assertEqual(list(sequence), [])

    def test_factory_source_is_restartable(self):
        sequence = Sequence(lambda: (n for n in range(3)))
        self.assertEqual(list(sequence), [0, 1, 2])
        self.assertEqual(list(sequence), [0, 1, 2])

    def test_invalid_sources(self):
        self.assertRaises(NullArgument, Sequence, None)
        self.assertRaises(TypeError, Sequence, 42)

    def test_range_factory(self):
        self.assertEqual(list(Sequence.range(2, 5)), [2, 3, 4])


class TestBatch(unittest.TestCase):
    """Test batch."""

    def test_batches_concatenate_to_source(self):
        """All but the last batch are full and together they reproduce the source."""
        source = list(range(11))
        for size in range(1, 6):
            batches = [list(b) for b in lazily.batch(source, size)]
            self.assertEqual([x for b in batches for x in b], source)
            self.assertTrue(all(len(b) == size for b in batches[:-1]))
            self.assertEqual(len(batches[-1]), len(source) % size or size)

    def test_batch_larger_than_source(self):
        self.assertEqual([list(b) for b in lazily.batch([1, 2], 5)], [[1, 2]])

    def test_collected_batches_keep_their_elements(self):
        batches = list(lazily.batch(range(5), 2))
        self.assertEqual([list(b) for b in batches], [[0, 1], [2, 3], [4]])

    def test_batch_of_infinite_source(self):
        batches = lazily.take(lazily.batch(integers(), 3), 2)
        self.assertEqual([list(b) for b in batches], [[0, 1, 2], [3, 4, 5]])

    def test_invalid_batch_size(self):
        for size in (0, -5):
            with self.assertRaises(InvalidArgument):
                lazily.batch(ExplodingIterable(), size)


class TestCycleAndRepeat(unittest.TestCase):
    """Test cycle and repeat."""

    def test_cycle(self):
        self.assertEqual(list(lazily.take(lazily.cycle([1, 2, 3]), 9)), [1, 2, 3] * 3)

    def test_cycle_of_empty_source_is_empty(self):
        self.assertEqual(list(lazily.cycle([])), [])

    def test_cycle_of_single_pass_source(self):
        self.assertEqual(list(lazily.cycle(n for n in [1, 2])), [1, 2])

    def test_repeat(self):
        self.assertEqual(list(lazily.repeat([1, 2], 3)), [1, 2, 1, 2, 1, 2])

    def test_repeat_zero_times_never_opens_source(self):
        self.assertEqual(list(lazily.repeat(ExplodingIterable(), 0)), [])

    def test_repeat_negative(self):
        with self.assertRaises(InvalidArgument):
            lazily.repeat([1], -1)

    def test_concat(self):
        self.assertEqual(list(lazily.concat([1], [], (2, 3), "a")), [1, 2, 3, "a"])
        self.assertEqual(list(lazily.concat()), [])


class TestSubsequences(unittest.TestCase):
    """Test drop, take, slice, rest and their predicate forms."""

    def test_take(self):
        self.assertEqual(list(lazily.take([1, 2, 3], 2)), [1, 2])
        self.assertEqual(list(lazily.take([1, 2, 3], 10)), [1, 2, 3])
        self.assertEqual(list(lazily.take([1, 2, 3], 0)), [])

    def test_take_reads_no_further_than_needed(self):
        source = CountingIterable(range(10))
        self.assertEqual(list(lazily.take(source, 3)), [0, 1, 2])
        self.assertEqual(source.pulled, 3)

    def test_drop(self):
        self.assertEqual(list(lazily.drop([1, 2, 3], 2)), [3])
        self.assertEqual(list(lazily.drop([1, 2, 3], 5)), [])

    def test_negative_counts_fail_before_iteration(self):
        for combinator in (lazily.take, lazily.drop):
            with self.assertRaises(InvalidArgument):
                combinator(ExplodingIterable(), -1)

    def test_slice(self):
        self.assertEqual(list(lazily.slice(range(10), 2, 8, 2)), [2, 4, 6])
        self.assertEqual(list(lazily.slice(range(10), 7)), [7, 8, 9])
        self.assertEqual(list(lazily.slice(range(10), stop=3)), [0, 1, 2])
        self.assertEqual(list(lazily.slice(range(10), 5, 2)), [])

    def test_slice_of_infinite_source(self):
        self.assertEqual(list(lazily.slice(integers(), 10, 20, 5)), [10, 15])

    def test_invalid_slices(self):
        for args in ((-1,), (0, -1), (0, 5, 0), (0, 5, -2)):
            with self.assertRaises(InvalidArgument):
                lazily.slice(range(10), *args)

    def test_rest(self):
        self.assertEqual(list(lazily.rest([1, 2, 3])), [2, 3])
        self.assertEqual(list(lazily.rest([])), [])

    def test_take_while(self):
        self.assertEqual(list(lazily.take_while([2, 4, 5, 6], is_even)), [2, 4])
        self.assertEqual(list(lazily.take_while(integers(), lambda n: n < 4)), [0, 1, 2, 3])

    def test_take_until(self):
        self.assertEqual(list(lazily.take_until([1, 2, 3, 4], lambda n: n == 3)), [1, 2])

    def test_drop_while(self):
        self.assertEqual(list(lazily.drop_while([1, 2, 3, 1], lambda n: n < 3)), [3, 1])
        self.assertEqual(list(lazily.drop_while([1, 2], lambda n: n < 3)), [])

    def test_drop_until(self):
        self.assertEqual(list(lazily.drop_until([1, 2, 3, 1], lambda n: n == 3)), [3, 1])


class TestTransformations(unittest.TestCase):
    """Test map, filter, reject and partition."""

    def test_map(self):
        self.assertEqual(list(lazily.map("abc", str.upper)), ["A", "B", "C"])

    def test_map_to_none_keeps_every_element(self):
        self.assertEqual(list(lazily.map([1, 2, 3], lambda n: None)), [None, None, None])

    def test_filter_and_reject(self):
        self.assertEqual(list(lazily.filter(range(7), is_even)), [0, 2, 4, 6])
        self.assertEqual(list(lazily.reject(range(7), is_even)), [1, 3, 5])

    def test_partition(self):
        """Every element lands in exactly one half, in source order."""
        source = [5, 2, 8, 1, 4, 7]
        matching, rest = lazily.partition(source, is_even)
        self.assertEqual(list(matching), [2, 8, 4])
        self.assertEqual(list(rest), [5, 1, 7])

        halves = lazily.partition(source, is_even)
        self.assertIsInstance(halves, Pair)
        self.assertEqual(sorted(list(halves.first) + list(halves.second)), sorted(source))

    def test_missing_callables(self):
        for combinator in (lazily.map, lazily.filter, lazily.reject, lazily.partition,
                           lazily.each, lazily.index, lazily.take_while, lazily.take_until,
                           lazily.drop_while, lazily.drop_until):
            with self.assertRaises(NullArgument):
                combinator([1, 2], None)

        with self.assertRaises(NullArgument):
            lazily.equate([1], [1], None)


class TestCombination(unittest.TestCase):
    """Test enumerate, index, equate, zip and cartesian_product."""

    def test_enumerate(self):
        self.assertEqual(list(lazily.enumerate("ab")), [Pair(0, "a"), Pair(1, "b")])
        self.assertEqual(list(lazily.enumerate("ab", start=1)), [(1, "a"), (2, "b")])

    def test_index(self):
        indexed = list(lazily.index(["apple", "fig"], len))
        self.assertEqual(indexed, [(5, "apple"), (3, "fig")])
        self.assertEqual(indexed[0].first, 5)
        self.assertEqual(indexed[0].second, "apple")

    def test_equate(self):
        equal = lazily.equate([1, 2, 3], [1, 5, 3, 4], lambda a, b: a == b)
        self.assertEqual(list(equal), [True, False, True])

    def test_zip_pairs(self):
        zipped = list(lazily.zip([1, 2, 3], "ab"))
        self.assertEqual(zipped, [(1, "a"), (2, "b")])
        self.assertTrue(all(isinstance(pair, Pair) for pair in zipped))

    def test_zip_three_sources(self):
        zipped = list(lazily.zip([1, 2], "ab", [True, False, None]))
        self.assertEqual(zipped, [Triple(1, "a", True), Triple(2, "b", False)])
        self.assertEqual(zipped[1].third, False)

    def test_zip_nine_sources(self):
        zipped = list(lazily.zip(*[range(n, n + 2) for n in range(9)]))
        self.assertEqual(len(zipped), 2)
        self.assertIsInstance(zipped[0], Nonuple)
        self.assertEqual(zipped[0].ninth, 8)

    def test_zip_too_many_sources(self):
        with self.assertRaises(InvalidArgument):
            lazily.zip(*[[1]] * 10)

    def test_zip_all_any_arity(self):
        zipped = list(lazily.zip_all([[1, 2]] * 10))
        self.assertEqual(zipped, [(1,) * 10, (2,) * 10])
        self.assertIs(type(zipped[0]), tuple)

    def test_zip_all_needs_two_sources(self):
        with self.assertRaises(InvalidArgument):
            lazily.zip_all([[1]])

    def test_zip_with_infinite_source(self):
        self.assertEqual(list(lazily.zip(integers(), "xyz")), [(0, "x"), (1, "y"), (2, "z")])

    def test_zip_with_none_source(self):
        with self.assertRaises(NullArgument):
            lazily.zip([1], None)

    def test_cartesian_product(self):
        product = list(lazily.cartesian_product([1, 2], ["x", "y"]))
        self.assertEqual(product, [(1, "x"), (1, "y"), (2, "x"), (2, "y")])
        self.assertIsInstance(product[0], Pair)

    def test_cartesian_product_three_sources(self):
        product = list(lazily.cartesian_product([1, 2], "ab", [True, False]))
        self.assertEqual(len(product), 8)
        self.assertEqual(product[:4], [(1, "a", True), (1, "a", False),
                                       (1, "b", True), (1, "b", False)])
        self.assertIsInstance(product[0], Triple)

    def test_cartesian_product_with_empty_source(self):
        self.assertEqual(list(lazily.cartesian_product([1, 2], [])), [])
        self.assertEqual(list(lazily.cartesian_product([], [1, 2])), [])

    def test_cartesian_product_all(self):
        product = list(lazily.cartesian_product_all([[0, 1]] * 4))
        self.assertEqual(len(product), 16)
        self.assertEqual(product[0], (0, 0, 0, 0))
        self.assertEqual(product[-1], (1, 1, 1, 1))

    def test_cartesian_product_with_infinite_outer_source(self):
        product = lazily.take(lazily.cartesian_product(integers(), "ab"), 3)
        self.assertEqual(list(product), [(0, "a"), (0, "b"), (1, "a")])

    def test_cartesian_product_is_restartable(self):
        product = lazily.cartesian_product([1, 2], [3])
        self.assertEqual(list(product), list(product))


class TestFirst(unittest.TestCase):
    """Test first."""

    def test_first(self):
        self.assertEqual(lazily.first([3, 4]), some(3))
        self.assertEqual(lazily.first([]), none())
        self.assertEqual(lazily.first(integers(7)), some(7))

    def test_first_none_element(self):
        result = lazily.first([None])
        self.assertTrue(result.has_value())
        self.assertIsNone(result.get())

    def test_integers_step(self):
        self.assertEqual(list(lazily.take(integers(5, 2), 3)), [5, 7, 9])


class TestSequenceMethods(unittest.TestCase):
    """The fluent methods mirror the module functions."""

    def test_fluent_chain(self):
        result = (Sequence(range(20))
                  .filter(is_even)
                  .map(lambda n: n // 2)
                  .drop(1)
                  .take(3))
        self.assertEqual(list(result), [1, 2, 3])

    def test_batch_yields_sequences(self):
        batches = list(Sequence("abcde").batch(2))
        self.assertTrue(all(isinstance(b, Sequence) for b in batches))
        self.assertEqual(["".join(b) for b in batches], ["ab", "cd", "e"])


if __name__ == "__main__":
    unittest.main()
