"""
Cursor-Based Connection Pagination

Slices an ordered sequence into a Relay-style connection: a window of
edges (node + cursor) plus page metadata and the total count of the
full sequence.

Cursors encode the zero-based offset of an item within the full,
unsliced sequence:

    >>> offset_to_cursor(0)
    'YXJyYXljb25uZWN0aW9uOjA='
    >>> cursor_to_offset('YXJyYXljb25uZWN0aW9uOjA=')
    0

Unknown or malformed ``after``/``before`` cursors are ignored rather
than reported, so clients holding stale cursors still get a page back.

Usage:
    connection = await paginate(store.get_videos(), PaginationArgs(first=10))
"""

import base64
import binascii
import inspect
from collections.abc import Awaitable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

CURSOR_PREFIX = "arrayconnection:"


class InvalidArgumentError(ValueError):
    """Raised when a pagination argument is out of range."""

    pass


# =============================================================================
# Connection Types
# =============================================================================


@dataclass(frozen=True)
class PaginationArgs:
    """
    Relay pagination arguments.

    Attributes:
        first: Keep at most this many edges from the start of the window
        last: Keep at most this many edges from the end of the window
        after: Only edges after this cursor
        before: Only edges before this cursor
    """

    first: int | None = None
    last: int | None = None
    after: str | None = None
    before: str | None = None


@dataclass(frozen=True)
class Edge(Generic[T]):
    """One node of a connection together with its cursor."""

    node: T
    cursor: str


@dataclass(frozen=True)
class PageInfo:
    """Page metadata of a connection."""

    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: str | None = None
    end_cursor: str | None = None


@dataclass(frozen=True)
class Connection(Generic[T]):
    """A window of edges over an ordered sequence."""

    edges: list[Edge[T]] = field(default_factory=list)
    page_info: PageInfo = field(default_factory=PageInfo)
    total_count: int = 0


# =============================================================================
# Cursors
# =============================================================================


def offset_to_cursor(offset: int) -> str:
    """Create the cursor for an offset in the full sequence."""
    raw = f"{CURSOR_PREFIX}{offset}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def cursor_to_offset(cursor: str) -> int | None:
    """
    Extract the offset from a cursor.

    Returns:
        The offset, or None if the cursor is malformed
    """
    try:
        raw = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
    except (AttributeError, UnicodeError, binascii.Error):
        return None

    if not raw.startswith(CURSOR_PREFIX):
        return None

    offset = raw[len(CURSOR_PREFIX):]
    if not (offset.isascii() and offset.isdigit()):
        return None
    return int(offset)


# =============================================================================
# Pagination
# =============================================================================


def _validate(args: PaginationArgs) -> None:
    if args.first is not None and args.first < 0:
        raise InvalidArgumentError(
            'Argument "first" must be a non-negative integer'
        )
    if args.last is not None and args.last < 0:
        raise InvalidArgumentError(
            'Argument "last" must be a non-negative integer'
        )


def _index_of(edges: list[Edge[T]], cursor: str | None) -> int | None:
    """Position of the edge with the given cursor, or None if absent."""
    if cursor is None:
        return None
    for index, edge in enumerate(edges):
        if edge.cursor == cursor:
            return index
    return None


def connection_from_list(
    items: Iterable[T],
    args: PaginationArgs | None = None,
) -> Connection[T]:
    """
    Build a connection from an already materialized sequence.

    Steps, in order:
    1. every item becomes an edge whose cursor encodes its offset
    2. ``after`` drops edges up to and including the matching cursor
    3. ``before`` drops edges from the matching cursor onward
    4. ``first`` keeps the first N remaining edges
    5. ``last`` keeps the last N of those

    ``total_count`` is always the length of the full sequence.

    Raises:
        InvalidArgumentError: If ``first`` or ``last`` is negative
    """
    args = args or PaginationArgs()
    _validate(args)

    snapshot = list(items)
    edges = [
        Edge(node=item, cursor=offset_to_cursor(offset))
        for offset, item in enumerate(snapshot)
    ]

    has_previous_page = False
    has_next_page = False

    after_index = _index_of(edges, args.after)
    if after_index is not None:
        has_previous_page = True
        edges = edges[after_index + 1:]

    before_index = _index_of(edges, args.before)
    if before_index is not None:
        has_next_page = True
        edges = edges[:before_index]

    if args.first is not None and len(edges) > args.first:
        has_next_page = True
        edges = edges[:args.first]

    if args.last is not None and len(edges) > args.last:
        has_previous_page = True
        edges = edges[len(edges) - args.last:]

    page_info = PageInfo(
        has_next_page=has_next_page,
        has_previous_page=has_previous_page,
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
    )

    return Connection(edges=edges, page_info=page_info, total_count=len(snapshot))


async def paginate(
    sequence: Iterable[T] | Awaitable[Iterable[T]],
    args: PaginationArgs | None = None,
) -> Connection[T]:
    """
    Build a connection from a sequence that may still be pending.

    The sequence is awaited first when needed. A copy of the result is
    then sliced with connection_from_list.

    Args:
        sequence: Ordered items, or an awaitable that resolves to them
        args: Pagination arguments (defaults to no slicing)

    Returns:
        Connection over the sequence

    Raises:
        InvalidArgumentError: If ``first`` or ``last`` is negative
    """
    if inspect.isawaitable(sequence):
        sequence = await sequence

    return connection_from_list(sequence, args)
