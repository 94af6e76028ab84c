import pytest

from plumb import Consumer, Producer, csum, czero, fuse, produce, psum, punit, pzero
from plumb.combinators import FlightRecorder
from fakes import make_consumers, make_producers


def test_fuse_defers_until_called() -> None:
    seen: list[str] = []
    effect = fuse(produce(["a", "b"]), seen.append)
    assert seen == []

    effect()
    assert seen == ["a", "b"]


def test_producer_replays_same_values() -> None:
    producer = produce(iter([1, 2, 3]))
    assert producer.collect() == [1, 2, 3]
    # One-shot iterators are materialised, so a second run sees the same values.
    assert producer.collect() == [1, 2, 3]


def test_produce_reads_collection_at_run_time() -> None:
    values = [1]
    producer = produce(values)
    values.append(2)
    assert producer.collect() == [1, 2]


def test_pzero_never_calls_consumer() -> None:
    calls: list[object] = []
    pzero()(calls.append)
    assert calls == []


def test_producer_sum_is_sequential() -> None:
    assert (produce([1, 2]) + produce([3])).collect() == [1, 2, 3]
    assert produce([1]).concat(punit(2)).collect() == [1, 2]


def test_consumer_sum_is_parallel() -> None:
    recorder = FlightRecorder()
    events = recorder.fusing(produce(["x", "y"]), recorder.consumer("a") + recorder.consumer("b"))
    assert events == [("x", "a"), ("x", "b"), ("y", "a"), ("y", "b")]


def test_producer_must_obey_monoid_laws() -> None:
    recorder = FlightRecorder()
    zero = pzero()
    producers = make_producers()
    for c in make_consumers(recorder):
        for p in producers:
            # pzero must be the left and right identity element under (+).
            assert recorder.fusing(p, c) == recorder.fusing(zero + p, c)
            assert recorder.fusing(p, c) == recorder.fusing(p + zero, c)
            for p1 in producers:
                for p2 in producers:
                    # (+) must be associative.
                    assert recorder.fusing(p + (p1 + p2), c) == recorder.fusing((p + p1) + p2, c)


def test_consumer_must_obey_monoid_laws() -> None:
    recorder = FlightRecorder()
    zero = czero()
    consumers = make_consumers(recorder)
    for p in make_producers():
        for c in consumers:
            # czero must be the left and right identity element under (+).
            assert recorder.fusing(p, c) == recorder.fusing(p, zero + c)
            assert recorder.fusing(p, c) == recorder.fusing(p, c + zero)
            for c1 in consumers:
                for c2 in consumers:
                    # (+) must be associative.
                    assert recorder.fusing(p, c + (c1 + c2)) == recorder.fusing(p, (c + c1) + c2)


def test_psum_and_csum_fold_the_monoids() -> None:
    assert psum().collect() == []
    assert psum(punit(1), produce([2, 3]), pzero()).collect() == [1, 2, 3]

    left: list[int] = []
    right: list[int] = []
    produce([1, 2])(csum(Consumer(left.append), Consumer(right.append)))
    assert left == [1, 2]
    assert right == [1, 2]
    assert csum() is czero()


def test_sum_with_non_producer_is_rejected() -> None:
    with pytest.raises(TypeError):
        produce([1]) + [2]  # type: ignore[operator]


def test_unpacked_consumer_spreads_tuple() -> None:
    pairs: list[str] = []
    consumer = Consumer.unpacked(lambda a, b: pairs.append(f"{a}{b}"))
    produce([(1, "a"), (2, "b")])(consumer)
    assert pairs == ["1a", "2b"]


def test_plain_callables_work_as_consumers() -> None:
    producer: Producer[int] = produce([1, 2])
    out: list[int] = []
    producer(out.append)
    assert out == [1, 2]
