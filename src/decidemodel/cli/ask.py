from __future__ import annotations

import sys
from typing import Callable, List, Optional

import requests

from decidemodel.config.settings import load_config
from decidemodel.errors import InputError
from decidemodel.features.answers import parse_answer
from decidemodel.features.questions import QUESTIONS, prompt_for
from decidemodel.models.signals import Answers, EvaluationResult
from decidemodel.models.types import Decision
from decidemodel.notify.slack import decision_message, notify
from decidemodel.state.evaluator import evaluate

OUTCOME_LINES = {
    Decision.YES: ["Recommended decision: YES"],
    Decision.CONFUSED: [
        "Recommended decision: Confused (Quantum Superposition)",
        "Take a break and reconsider.",
    ],
    Decision.NO: ["Recommended decision: NO"],
}


def collect_answers(read: Callable[[str], str] = input, strict: bool = False) -> Answers:
    values: List[int] = []
    for i in range(1, len(QUESTIONS) + 1):
        try:
            raw: Optional[str] = read(prompt_for(i))
        except EOFError:
            raw = None
        try:
            values.append(parse_answer(raw, strict=strict))
        except InputError as e:
            raise InputError(f"question {i}: {e}") from None
    return Answers.from_list(values)


def render(decision: Decision) -> List[str]:
    return list(OUTCOME_LINES[decision])


def report(result: EvaluationResult, as_json: bool = False, send: bool = False) -> None:
    if as_json:
        print(result.model_dump_json())
    else:
        for line in render(result.decision):
            print(line)

    if send:
        # keep stdout parseable when it carries JSON
        note_to = sys.stderr if as_json else sys.stdout
        try:
            if not notify(decision_message(result.decision, result.weighted_sum)):
                print("note: SLACK_WEBHOOK_URL not set, notification skipped", file=note_to)
        except requests.RequestException as e:
            # The recommendation is already out; a failed post is only reported.
            print(f"note: notification failed: {type(e).__name__}: {e}", file=note_to)


def run(
    config_path: Optional[str] = None,
    strict: bool = False,
    send: bool = False,
    read: Callable[[str], str] = input,
) -> EvaluationResult:
    cfg = load_config(config_path)
    answers = collect_answers(read=read, strict=strict)
    result = evaluate(answers, cfg)
    report(result, send=send)
    return result
