import uuid


def generate_id() -> str:
    """Random opaque identifier for new folders"""
    return uuid.uuid4().hex
