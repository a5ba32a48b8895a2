class FixedRandom:
    """Stand-in random source replaying fixed ``random()`` values."""

    def __init__(self, values):
        self._values = iter(values)

    def random(self) -> float:
        return next(self._values)
