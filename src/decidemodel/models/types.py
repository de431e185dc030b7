from enum import Enum, IntEnum

class Answer(IntEnum):
    NO = 0
    CONFUSED = 1
    YES = 2

class Decision(str, Enum):
    YES = "YES"
    CONFUSED = "CONFUSED"
    NO = "NO"

    @property
    def code(self) -> int:
        # legacy return codes: 0 = yes, 1 = confused, 2 = no
        return _CODES[self]

_CODES = {Decision.YES: 0, Decision.CONFUSED: 1, Decision.NO: 2}
