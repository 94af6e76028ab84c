"""
Algebraic laws example.

Shows the orderings the combinators guarantee, using small in-memory
producers instead of records.
"""

from plumb import Filter, lift_a, papply, pcross, produce
from plumb.combinators import same_multiset, same_sequence


def main() -> None:
    numbers = produce([1, 2, 3])
    letters = produce(["a", "b", "c"])

    # Left-most producer varies slowest.
    print(pcross(numbers, letters).collect())
    print(lift_a(lambda n, s: s * n)(numbers, letters).collect())
    print(papply(produce([lambda x: x + 10, lambda x: 2 * x]), numbers).collect())

    twice = Filter(lambda x: produce([x, x]))
    bang = Filter.lift(lambda x: f"{x}!")
    ask = Filter.lift(lambda x: f"{x}?")

    # Exact: (f + g) into h == f into h + g into h
    print(same_sequence((twice + bang).into(ask)("x"), (twice.into(ask) + bang.into(ask))("x")))
    # Up to order: f into (g + h) ~ f into g + f into h
    left = twice.into(bang + ask)("x")
    right = (twice.into(bang) + twice.into(ask))("x")
    print(left.collect(), right.collect(), same_multiset(left, right))


if __name__ == "__main__":
    main()
