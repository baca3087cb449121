"""
GraphQL Node Interface

Every object that can be fetched through the root ``node`` field
implements this interface. Its ``id`` is a global ID, unique across
all object types.
"""

import strawberry


@strawberry.interface(description="An object with a globally unique ID")
class Node:
    """
    Relay Node interface.

    Object types implementing it are resolved from the entity's type
    when returned from the ``node`` field.
    """

    id: strawberry.ID = strawberry.field(description="The ID of an object")
