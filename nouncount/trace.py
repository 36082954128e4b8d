"""
Parse tracing.

Records, for one sentence, which rule fired on every word and what the parser
did about it, so a misclassification can be explained after the fact.
"""
import json
import uuid
from datetime import datetime, timezone


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class ParseTrace:
    """
    Represents a single, complete trace of how one sentence was parsed.
    """
    def __init__(self, sentence: str):
        self.trace_id = str(uuid.uuid4())
        self.start_time = _utc_now()
        self.end_time = None
        self.sentence = sentence
        self.steps = []
        self.segments = None
        self.error = None

    def add_step(self, position: int, word: str, rule: str, action: str = None):
        """
        Adds a step to the trace.

        Args:
            position: Index of the word within the sentence.
            word: The token as it appeared in the sentence.
            rule: Name of the rule that matched the word.
            action: Optional description of what the parser did.
        """
        step = {
            "step_id": len(self.steps) + 1,
            "position": position,
            "word": word,
            "rule": rule,
        }
        if action:
            step["action"] = action
        self.steps.append(step)

    def set_result(self, segments):
        """Stores the finalized segments and concludes the trace."""
        self.segments = [segment.to_dict() for segment in segments]
        self.end_time = _utc_now()

    def set_error(self, error_message: str):
        """Records an error and concludes the trace."""
        self.error = error_message
        self.end_time = _utc_now()

    def rules(self):
        """The rule names in the order they fired."""
        return [step["rule"] for step in self.steps]

    def to_json(self, indent=2):
        """Serializes the trace to a JSON string."""
        return json.dumps(self, default=lambda o: o.__dict__, indent=indent, ensure_ascii=False)
