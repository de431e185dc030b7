from __future__ import annotations

import random
from typing import Optional

from decidemodel.models.types import Answer, Decision

# Probability of keeping the answer's own label; the rest drifts one step toward NO.
YES_KEEP = 0.7
CONFUSED_KEEP = 0.5


def hadamard_gate_adjusted(answer: int, rng: Optional[random.Random] = None) -> Decision:
    """
    "Superposition" of a single answer: YES stays YES 70% of the time and
    otherwise reads CONFUSED; CONFUSED splits 50/50 with NO; anything else
    is NO. Pass a seeded Random to make the draw reproducible.
    """
    r = rng or random.Random()
    p = r.randrange(100) / 100.0  # two-decimal resolution

    if answer == Answer.YES:
        return Decision.YES if p < YES_KEEP else Decision.CONFUSED
    if answer == Answer.CONFUSED:
        return Decision.CONFUSED if p < CONFUSED_KEEP else Decision.NO
    return Decision.NO


def cnot_gate(control: int, target: int) -> int:
    # flips target only when control is exactly 1
    return int(not target) if control == 1 else target
