#!/usr/bin/env python3
"""
Basic usage examples for seqfunk.
"""

import random

from seqfunk import (
    Sequence,
    SeqFunkConfig,
    PipelineProfiler,
    integers,
    lazily,
    option,
)
from seqfunk.profiler import profiled


def example_pipeline():
    """Example: Compose combinators without materializing anything."""
    print("\n=== Lazy Pipeline Example ===")

    data = [
        {'name': 'Alice', 'age': 25, 'score': 85},
        {'name': 'Bob', 'age': 30, 'score': 90},
        {'name': 'Charlie', 'age': 25, 'score': 78},
        {'name': 'David', 'age': 30, 'score': 92},
        {'name': 'Eve', 'age': 25, 'score': 88},
    ]

    graded = Sequence(data) \
        .filter(lambda x: x['age'] == 25) \
        .map(lambda x: {'name': x['name'], 'grade': 'A' if x['score'] >= 85 else 'B'})

    # Nothing has run yet; iterating runs the whole chain
    print("Filtered and transformed data:")
    for item in graded:
        print(f"  {item}")

    # The same sequence can be walked again
    print(f"Graded again: {len(list(graded))} people")


def example_infinite():
    """Example: Work with infinite sources."""
    print("\n=== Infinite Sequence Example ===")

    squares = lazily.map(integers(1), lambda n: n * n)
    print(f"First squares: {list(lazily.take(squares, 8))}")

    below_100 = lazily.take_while(squares, lambda n: n < 100)
    print(f"Squares below 100: {list(below_100)}")

    rounds = lazily.take(lazily.cycle(['north', 'east', 'south', 'west']), 6)
    print(f"Patrol route: {list(rounds)}")


def example_batching():
    """Example: Batch a stream of readings."""
    print("\n=== Batching Example ===")

    readings = Sequence.infinite(lambda: round(random.uniform(15, 25), 1))
    for number, batch in lazily.enumerate(lazily.take(lazily.batch(readings, 4), 3), start=1):
        values = list(batch)
        print(f"Batch {number}: {values} (mean {sum(values) / len(values):.1f})")


def example_combining():
    """Example: Zip, product and comparison."""
    print("\n=== Combining Example ===")

    names = ['Alice', 'Bob', 'Charlie']
    print(f"Enumerated: {list(lazily.enumerate(names))}")
    print(f"Indexed by length: {list(lazily.index(names, len))}")

    for name, age, city in lazily.zip(names, [25, 30, 35], ['Oslo', 'Lima', 'Pune']):
        print(f"  {name} ({age}) lives in {city}")

    grid = lazily.cartesian_product(['a', 'b'], [1, 2], [True, False])
    print(f"Grid has {len(list(grid))} cells; first is {lazily.first(grid).get()}")

    matches = lazily.equate('kitten', 'sitting', lambda a, b: a == b)
    print(f"Matching letters: {list(matches)}")


def example_option():
    """Example: Handle absence with Option."""
    print("\n=== Option Example ===")

    settings = {'theme': 'dark'}
    theme = option(settings.get('theme')).get_or_else('light')
    font = option(settings.get('font')).or_some('monospace').get()
    print(f"Theme: {theme}, font: {font}")

    empty = lazily.first(lazily.filter(range(10), lambda n: n > 100))
    print(f"First value above 100: {empty.get_or_none()}")


@profiled(name="odd_cubes")
def odd_cubes(limit):
    return lazily.map(lazily.filter(range(limit), lambda n: n % 2), lambda n: n ** 3)


def example_profiling():
    """Example: Profile pipelines."""
    print("\n=== Profiling Example ===")

    report = PipelineProfiler().profile(
        lazily.map(integers(), lambda n: str(n) * 10), limit=100000, name="strings")
    print(report.summary)

    total = sum(odd_cubes(10000))
    print(f"Sum of odd cubes: {total}")
    print(odd_cubes.last_report.summary)


def main():
    """Run all examples."""
    print("=== seqfunk Examples ===")

    # Configure seqfunk
    SeqFunkConfig.set_defaults(
        enable_profiling=True,
        profile_sample_interval=1000,
    )

    # Run examples
    example_pipeline()
    example_infinite()
    example_batching()
    example_combining()
    example_option()
    example_profiling()

    print("\n=== All examples completed! ===")


if __name__ == "__main__":
    main()
