from typing import Iterable, Optional


class ScriptedRng:
    """Stands in for ``np.random.Generator`` and replays fixed draws."""

    def __init__(self, randoms: Iterable[float] = (), integers: Iterable[int] = ()) -> None:
        self._randoms = list(randoms)
        self._integers = list(integers)

    def random(self) -> float:
        return self._randoms.pop(0)

    def integers(self, low: int, high: Optional[int] = None) -> int:
        value = self._integers.pop(0)
        assert low <= value < high
        return value

    @property
    def exhausted(self) -> bool:
        return not self._randoms and not self._integers
