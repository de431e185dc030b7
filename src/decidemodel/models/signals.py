from typing import List

from pydantic import BaseModel, ConfigDict

from decidemodel.models.types import Decision

class Answers(BaseModel):
    model_config = ConfigDict(frozen=True)

    q1: int  # aligned with long-term goals
    q2: int  # outcomes considered
    q3: int  # emotionally calm
    q4: int  # reversible / flexible
    q5: int  # enough time to think

    def as_list(self) -> List[int]:
        return [self.q1, self.q2, self.q3, self.q4, self.q5]

    @classmethod
    def from_list(cls, values: List[int]) -> "Answers":
        if len(values) != 5:
            raise ValueError(f"expected 5 answers, got {len(values)}")
        return cls(q1=values[0], q2=values[1], q3=values[2], q4=values[3], q5=values[4])

class EvaluationResult(BaseModel):
    answers: Answers
    weighted_sum: float
    decision: Decision
