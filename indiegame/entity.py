"""Named base for engine objects."""


class Entity:
    """Something with a name."""

    def __init__(self, name: str = "") -> None:
        self.name = name