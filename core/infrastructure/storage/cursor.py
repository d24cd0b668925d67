"""
Opaque pagination cursors.

A cursor names the insertion sequence number of the last record
returned by a listing, scoped to one collection. Sequence numbers are
never reassigned, so deletions cannot shift a cursor's position.
"""
import base64

from core.domain.exceptions import InvalidCursorError


def encode_cursor(collection: str, sequence: int) -> str:
    """Encode a collection position as an opaque URL-safe token."""
    raw = f"{collection}:{sequence}".encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_cursor(token: str, collection: str) -> int:
    """
    Decode a cursor token back to a sequence number.

    Args:
        token: Token previously returned by encode_cursor
        collection: Collection the token must belong to

    Returns:
        Sequence number of the last record seen

    Raises:
        InvalidCursorError: If the token is malformed or from another collection
    """
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")
    except ValueError as e:
        raise InvalidCursorError(f"Cursor is not decodable: {token!r}") from e

    name, sep, sequence = raw.rpartition(":")
    if not sep or name != collection:
        raise InvalidCursorError(f"Cursor does not belong to collection '{collection}'")
    if not (sequence.isascii() and sequence.isdigit()):
        raise InvalidCursorError(f"Cursor position is not numeric: {token!r}")
    return int(sequence)
