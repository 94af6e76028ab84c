from dataclasses import dataclass, field

from plumb import Consumer, Filter, ffork, produce, punit, read_only, read_only_tuple, read_write, read_write_tuple
from plumb.rw import (
    AttrPointer,
    Borrowed,
    ItemPointer,
    Mutable,
    Pointer,
    RootPointer,
    attr_field,
    tuple_ro,
    tuple_rw,
    view,
)


@dataclass
class Box:
    label: str
    tags: list[str] = field(default_factory=list)


class ExplodingFilter:
    """An RW filter that fails the test if it is ever run."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, value: object) -> object:
        self.calls += 1
        raise AssertionError("filter must not run")


def test_pointers_read_and_write_their_slot() -> None:
    box = Box("a", ["x", "y"])

    label = AttrPointer(box, "label")
    assert label.get() == "a"
    label.set("b")
    assert box.label == "b"

    tag = ItemPointer(box.tags, 1)
    tag.value = "z"
    assert box.tags == ["x", "z"]
    assert tag.value == "z"

    root = Pointer.root(box)
    assert isinstance(root, RootPointer)
    assert root.get() is box


def test_view_picks_variant_by_handle() -> None:
    borrowed = view("ro")
    assert isinstance(borrowed, Borrowed)
    assert borrowed.rw is None

    box = Box("a")
    pointer = AttrPointer(box, "label")
    mutable = view(box.label, pointer)
    assert isinstance(mutable, Mutable)
    assert mutable.rw.get() is mutable.ro


def test_read_only_sees_references_without_write_access() -> None:
    seen: list[object] = []

    def spy(rw_box):
        seen.append(rw_box.rw)
        return punit(view(rw_box.ro.label, None))

    box = Box("hello")
    assert read_only(Filter(spy))(box).collect() == ["hello"]
    assert seen == [None]


def test_read_write_hands_out_pointers_into_record() -> None:
    label = attr_field("label").required()
    box = Box("old")

    for pointer in read_write(label)(Pointer.root(box)).collect():
        pointer.set("new")
    assert box.label == "new"

    # A bare record is wrapped in a root pointer.
    read_write(label)(box)(lambda p: p.set("newer"))
    assert box.label == "newer"


def test_read_write_of_absent_target_runs_nothing() -> None:
    rwf = ExplodingFilter()
    assert read_write(rwf)(None).collect() == []
    assert read_write_tuple(rwf)(None).collect() == []
    assert rwf.calls == 0


def test_read_write_of_pointer_to_empty_slot_runs_nothing() -> None:
    rwf = ExplodingFilter()
    holder = Box("unused")
    holder.label = None  # type: ignore[assignment]
    empty = AttrPointer(holder, "label")

    assert read_write(rwf)(empty).collect() == []
    assert read_write_tuple(rwf)(empty).collect() == []
    assert read_write(rwf)(Pointer.root(None)).collect() == []
    assert rwf.calls == 0


def test_replacing_root_needs_a_real_slot() -> None:
    identity = Filter(punit)
    box = Box("a")

    # A bare record gets a temporary root cell; replacing it leaves the caller alone.
    read_write(identity)(box)(lambda p: p.set(Box("b")))
    assert box.label == "a"

    root = Pointer.root(box)
    read_write(identity)(root)(lambda p: p.set(Box("b")))
    assert root.get().label == "b"


def test_read_write_skips_results_without_handle() -> None:
    def mixed(rw_box):
        return produce([view("borrowed"), view(rw_box.ro.label, AttrPointer(rw_box.ro, "label"))])

    pointers = read_write(Filter(mixed))(Box("kept")).collect()
    assert len(pointers) == 1
    assert pointers[0].get() == "kept"


def test_tuple_projections_preserve_positions() -> None:
    box = Box("a")
    views = (view("x"), view(box.label, AttrPointer(box, "label")))
    assert tuple_ro(views) == ("x", "a")
    handles = tuple_rw(views)
    assert handles[0] is None
    assert handles[1].get() == "a"


def test_tuple_variants_over_fork() -> None:
    label = attr_field("label").required()
    tags = attr_field("tags").repeated()
    both = ffork(label, tags)
    box = Box("L", ["t1", "t2"])

    assert read_only_tuple(both)(box).collect() == [("L", "t1"), ("L", "t2")]

    def mark(label_ptr, tag_ptr):
        tag_ptr.set(f"{label_ptr.get()}:{tag_ptr.get()}")

    read_write_tuple(both)(box)(Consumer.unpacked(mark))
    assert box.tags == ["L:t1", "L:t2"]
    assert box.label == "L"
