"""Utility helper functions shared by the server and the worker."""

import uuid
from typing import Any, Optional

from bson import ObjectId


def generate_uuid() -> str:
    """
    Generate a new UUID4 string.

    Returns:
        UUID4 string
    """
    return str(uuid.uuid4())


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """
    Convert a client-supplied identifier into an ObjectId.

    Args:
        value: Hex string (or ObjectId) received from a request or job

    Returns:
        ObjectId, or None if the value is not a well-formed identifier
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)
