"""Basic usage examples for Shapeguard."""

from shapeguard import (
    TypeValidationError,
    a_number, a_string, a_null, all, an_array, an_object, an_unknown, any, as_, is_,
)


# Example 1: Closed record
def a_point():
    return an_object({"x": a_number, "y": a_number})


# Example 2: Tagged union of closed records
def a_shape():
    return any({
        "aCircle": an_object({"kind": "circle", "center": a_point, "radius": a_number}),
        "aPolygon": an_object({"kind": "polygon", "vertices": an_array(a_point)}),
    })


# Example 3: Recursive definition
def a_comment():
    return an_object({
        "author": a_string,
        "text": a_string,
        "replies": an_array(a_comment),
    })


# Example 4: Intersection of open records
def an_entity():
    return an_object({"id": a_number}, an_unknown)


def a_named():
    return an_object({"name": any({"aString": a_string, "aNull": a_null})}, an_unknown)


def a_named_entity():
    return all([an_entity, a_named])


if __name__ == "__main__":
    is_shape = is_(a_shape)
    to_comment = as_(a_comment)

    print(f"is_shape(circle) = {is_shape({'kind': 'circle', 'center': {'x': 0, 'y': 0}, 'radius': 1})}")
    print(f"is_shape(square) = {is_shape({'kind': 'square', 'side': 1})}")

    thread = to_comment({
        "author": "ann",
        "text": "first",
        "replies": [{"author": "bob", "text": "second", "replies": []}],
    })
    print(f"to_comment(thread) is thread: {to_comment(thread) is thread}")

    try:
        to_comment({"author": "ann", "text": "first", "replies": [{"author": 1}]})
    except TypeValidationError as e:
        print(f"Validation failed: {e}")

    print(f"named entity: {as_(a_named_entity)({'id': 7, 'name': None, 'extra': True})}")
