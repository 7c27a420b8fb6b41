"""
Key generation for cached interpolation queries.
"""


class IDGenerator:
    """Hands out query keys 0, 1, 2, ... in registration order."""

    def __init__(self, start_id: int = 0):
        self.current_id = start_id

    def next_id(self) -> int:
        """Consume and return the next key."""
        key = self.current_id
        self.current_id += 1
        return key
