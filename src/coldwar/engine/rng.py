"""Random stream for Cold War Terminal.

The whole simulation draws from one seeded stream, threaded explicitly
through document generation and directive resolution. Call order therefore
fixes the outcome sequence, which is what makes seeded replays reproducible.
"""

from __future__ import annotations

import random
from typing import Optional


class GameRandom(random.Random):
    """``random.Random`` with the weighted-boolean primitive the engine uses.

    The engine only needs three primitives:
    - ``randrange(start, stop)``: uniform integer in a half-open range
    - ``random()``: uniform float in [0, 1)
    - ``chance(probability)``: True with the given probability
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        super().__init__(seed)

    def chance(self, probability: float) -> bool:
        """Weighted boolean drawn from one ``random()`` call.

        A probability of 0 never fires and 1 always fires, but both still
        consume a draw so the stream stays aligned with the call sequence.
        """
        return self.random() < probability
