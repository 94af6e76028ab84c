import pytest

from plumb import ArityError, lift_a, papply, pcross, ppure, produce, pzero


def add_ten(x: int) -> int:
    return x + 10


def double(x: int) -> int:
    return 2 * x


def int_string(i: int, s: str) -> tuple[int, str]:
    return (i, s)


def test_lift_over_pure() -> None:
    assert lift_a(add_ten)(ppure(3)).collect() == [13]


def test_papply_varies_functions_slowest() -> None:
    fns = produce([add_ten, double])
    assert papply(fns, produce([1, 2, 3])).collect() == [11, 12, 13, 2, 4, 6]


def test_lift_unary() -> None:
    assert lift_a(add_ten)(produce([1, 2, 3])).collect() == [11, 12, 13]


def test_lift_binary() -> None:
    p123 = produce([1, 2, 3])
    assert lift_a(lambda x, y: x + y)(p123, p123).collect() == [2, 3, 4, 3, 4, 5, 4, 5, 6]


def test_lifted_functions_consume_leftmost_producer_slowest() -> None:
    result = lift_a(int_string)(produce([1, 2, 3]), produce(["a", "b", "c"])).collect()
    assert result == [
        (1, "a"), (1, "b"), (1, "c"),
        (2, "a"), (2, "b"), (2, "c"),
        (3, "a"), (3, "b"), (3, "c"),
    ]


def test_lift_ternary_is_lexicographic() -> None:
    result = lift_a(lambda a, b, c: a + b + c)(
        produce(["x", "y"]), produce(["1", "2"]), produce(["!", "?"])
    ).collect()
    assert result == ["x1!", "x1?", "x2!", "x2?", "y1!", "y1?", "y2!", "y2?"]


def test_lift_nullary() -> None:
    assert lift_a(lambda: "only")().collect() == ["only"]


def test_lift_with_empty_producer_yields_nothing() -> None:
    assert lift_a(int_string)(produce([1, 2]), pzero()).collect() == []


def test_lift_rejects_wrong_arity() -> None:
    with pytest.raises(ArityError) as excinfo:
        lift_a(int_string)(produce([1]))
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1

    with pytest.raises(TypeError):
        lift_a(add_ten)(produce([1]), produce([2]))


def test_pcross_orders_tuples_lexicographically() -> None:
    result = pcross(produce([1, 2, 3]), produce(["a", "b", "c"])).collect()
    assert result == [
        (1, "a"), (1, "b"), (1, "c"),
        (2, "a"), (2, "b"), (2, "c"),
        (3, "a"), (3, "b"), (3, "c"),
    ]


def test_pcross_edge_arities() -> None:
    assert pcross().collect() == [()]
    assert pcross(produce([1, 2])).collect() == [(1,), (2,)]
    assert pcross(produce([1]), produce(["a"]), produce([True])).collect() == [(1, "a", True)]
