import random
from collections.abc import Sequence
from typing import Final

COMPUTER_NAMES: Final = ("Magic Head", "Galileo Humpkins", "Hollabackatcha", "Methuselah Honeysuckle")


class NameRegistry:
    """Names already taken in a session.

    Shared by whoever creates players, so two players never end up with the same name.
    """

    def __init__(self) -> None:
        self._taken: set[str] = set()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().casefold() in self._taken

    def claim(self, name: str) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Name cannot be blank")
        if cleaned in self:
            msg = f"Name already taken: {cleaned}"
            raise ValueError(msg)
        self._taken.add(cleaned.casefold())
        return cleaned

    def claim_random(self, candidates: Sequence[str] = COMPUTER_NAMES, rng: random.Random | None = None) -> str:
        available = [name for name in candidates if name not in self]
        if not available:
            raise ValueError("No names left to choose from")
        rng = rng if rng is not None else random.Random()  # noqa: S311
        return self.claim(rng.choice(available))
