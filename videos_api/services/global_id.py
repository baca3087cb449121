"""
Global Object Identification

Translates between opaque global IDs and (type name, local id) pairs,
and resolves a global ID to the stored object it names.

A global ID is the base64 encoding of ``"TypeName:local_id"``:

    >>> to_global_id("Video", "a")
    'VmlkZW86YQ=='
    >>> from_global_id("VmlkZW86YQ==")
    ResolvedGlobalId(type_name='Video', local_id='a')

Global IDs come straight from clients, so decoding never lets a
decoding error escape: every malformed input raises
MalformedIdentifierError.
"""

import base64
import binascii
import logging
from collections.abc import Mapping
from typing import Any, NamedTuple, Protocol

logger = logging.getLogger(__name__)

SEPARATOR = ":"

VIDEO_TYPE = "Video"

# Object types that can be resolved through the Node interface
KNOWN_TYPES = frozenset({VIDEO_TYPE})


class MalformedIdentifierError(ValueError):
    """Raised when a global ID cannot be decoded."""

    pass


class ResolvedGlobalId(NamedTuple):
    """A decoded global ID."""

    type_name: str
    local_id: str


class ObjectStore(Protocol):
    """The lookup capability resolve_node needs from a store."""

    def get_object_by_id(self, type_name: str, object_id: str) -> Any: ...


def to_global_id(type_name: str, local_id: str | int) -> str:
    """
    Encode a type name and local id into a global ID.

    Args:
        type_name: GraphQL object type name (must not contain ':')
        local_id: Identifier unique within that type

    Returns:
        Base64 encoded global ID

    Raises:
        ValueError: If the type name is empty or contains ':'
    """
    if not type_name or SEPARATOR in type_name:
        raise ValueError(f"Invalid type name for a global ID: {type_name!r}")

    raw = f"{type_name}{SEPARATOR}{local_id}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def from_global_id(global_id: str) -> ResolvedGlobalId:
    """
    Decode a global ID into its type name and local id.

    The payload is split on the first ':' so local ids may contain
    the separator themselves.

    Args:
        global_id: Global ID as received from a client

    Returns:
        ResolvedGlobalId with type_name and local_id

    Raises:
        MalformedIdentifierError: If the value is not a valid global ID
    """
    if not isinstance(global_id, str) or not global_id:
        raise MalformedIdentifierError("Global ID must be a non-empty string")

    try:
        raw = base64.b64decode(global_id.encode("ascii"), validate=True)
        decoded = raw.decode("utf-8")
    except (UnicodeError, binascii.Error) as e:
        logger.debug(f"Could not decode global ID {global_id!r}: {e}")
        raise MalformedIdentifierError(
            f"Invalid global ID: {global_id!r}"
        ) from e

    type_name, separator, local_id = decoded.partition(SEPARATOR)
    if not separator or not type_name or not local_id:
        logger.debug(f"Global ID {global_id!r} decodes to {decoded!r}")
        raise MalformedIdentifierError(f"Invalid global ID: {global_id!r}")

    return ResolvedGlobalId(type_name=type_name, local_id=local_id)


def resolve_node(store: ObjectStore, global_id: str) -> Any | None:
    """
    Fetch the object a global ID refers to.

    The decoded type name is lower-cased before the store lookup.
    Absence is a normal outcome and resolves to None.

    Raises:
        MalformedIdentifierError: If the global ID cannot be decoded
    """
    type_name, local_id = from_global_id(global_id)
    return store.get_object_by_id(type_name.lower(), local_id)


def type_of(entity: Any) -> str | None:
    """
    Determine which object type a resolved entity belongs to.

    Entities carrying a known ``kind`` discriminator are dispatched on
    it. Entities without one fall back to field sniffing: anything with
    a title is a Video. That fallback only works while Video is the
    only type with a title.

    Returns:
        The GraphQL type name, or None if the entity matches no type
    """
    if entity is None:
        return None

    kind = _field(entity, "kind")
    if kind is not None:
        return kind if kind in KNOWN_TYPES else None

    if _field(entity, "title"):
        return VIDEO_TYPE

    return None


def _field(entity: Any, name: str) -> Any:
    """Read a field from either a mapping or an attribute-style object."""
    if isinstance(entity, Mapping):
        return entity.get(name)
    return getattr(entity, name, None)
