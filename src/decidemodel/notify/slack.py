import os
import json
import requests

from decidemodel.models.types import Decision

def notify(text: str) -> bool:
    url = os.getenv("SLACK_WEBHOOK_URL")
    if not url:
        return False

    resp = requests.post(
        url,
        data=json.dumps({"text": text}),
        headers={"Content-Type": "application/json"},
        timeout=10,
    )
    resp.raise_for_status()
    return True

def decision_message(decision: Decision, total: float) -> str:
    return f"decidemodel recommendation: {decision.value} (weighted sum {total:.2f})"
