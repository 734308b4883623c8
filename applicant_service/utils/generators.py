"""ID generation utilities."""

import uuid


def generate_request_id() -> str:
    """Generate a unique request ID.

    Returns:
        Request ID string (UUID4)
    """
    return str(uuid.uuid4())
