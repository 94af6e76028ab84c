"""Filter products: fork over one shared input, cross over a tuple of inputs."""

# Filter products satisfy the following laws:
#
# 1. Fork: ffork(f, g)(x) == pcross(f(x), g(x))
#    Every filter sees the same input
#
# 2. Cross: fcross(f, g)((x, y)) == pcross(f(x), g(y))
#    Filters are applied elementwise
#
# 3. Fork then cross: ffork(f, h).into(fcross(g, i)) ~ ffork(f.into(g), h.into(i))
#    Same tuples; the order matches exactly when f and h yield at most one value


from __future__ import annotations

from collections.abc import Callable
from typing import Any

from plumb.combinators.applicative import pcross
from plumb.kernel.errors import ArityError
from plumb.kernel.filter import Filter
from plumb.kernel.producer import Producer

AnyFilter = Callable[[Any], Producer[Any]]


def ffork(*filters: AnyFilter) -> Filter[Any, tuple[Any, ...]]:
    """Run every filter on the same input and cross their results.

    Args:
        *filters: Filters sharing one input type (at least one)

    Returns:
        Filter[X, tuple]: A filter yielding one tuple per combination of the
            filters' outputs, left-most filter varying slowest.
    """
    if not filters:
        raise ArityError("ffork needs at least one filter", expected=1, actual=0)

    def run(value: Any) -> Producer[tuple[Any, ...]]:
        return pcross(*(f(value) for f in filters))

    return Filter(run)


def fcross(*filters: AnyFilter) -> Filter[tuple[Any, ...], tuple[Any, ...]]:
    """Apply filters elementwise to a tuple of inputs and cross their results.

    Args:
        *filters: One filter per tuple position (at least one)

    Returns:
        Filter[tuple, tuple]: A filter over tuples of the same length as
            filters. A tuple of any other length raises ArityError.
    """
    if not filters:
        raise ArityError("fcross needs at least one filter", expected=1, actual=0)

    def run(values: tuple[Any, ...]) -> Producer[tuple[Any, ...]]:
        if len(values) != len(filters):
            raise ArityError(
                f"fcross over {len(filters)} filters received a {len(values)}-tuple",
                expected=len(filters),
                actual=len(values),
            )
        return pcross(*(f(v) for f, v in zip(filters, values)))

    return Filter(run)
