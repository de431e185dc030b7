from __future__ import annotations

from typing import Optional

from decidemodel.errors import InputError
from decidemodel.models.types import Answer

VALID_ANSWERS = {a.value for a in Answer}


def parse_answer(raw: Optional[str], strict: bool = False) -> int:
    """
    Turn one console response into an answer.

    None (end of input), blank text and anything that is not an integer raise
    InputError. Integers outside 0..2 pass through unless strict is set.
    """
    if raw is None:
        raise InputError("no answer given (end of input)")

    text = raw.strip()
    if not text:
        raise InputError("no answer given")

    try:
        value = int(text)
    except ValueError:
        raise InputError(f"not an integer: {text!r}") from None

    if strict and value not in VALID_ANSWERS:
        raise InputError(f"answer must be 0, 1 or 2, got {value}")
    return value
