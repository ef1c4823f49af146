import uuid

ID_SIZE = 8


def new_id(size: int = ID_SIZE) -> str:
    """Return a short random identifier for a scene primitive."""
    if not 1 <= size <= 32:
        raise ValueError(f"Identifier size must be between 1 and 32, got {size}.")
    return uuid.uuid4().hex[:size]
