"""Remote record data model."""
from dataclasses import dataclass, field
from typing import Any, Dict

PROMPT_PREVIEW_LENGTH = 50


@dataclass
class Record:
    """A generation row with its prompt and media fields."""
    record_id: str
    prompt: str = ""
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, payload: Dict, prompt_field: str = "Prompt") -> "Record":
        fields = payload.get('fields') or {}
        return cls(
            record_id=payload['id'],
            prompt=fields.get(prompt_field) or "",
            fields=fields,
        )

    def media_count(self, field_name: str) -> int:
        """Number of attachments in a media field (0 if absent)."""
        value = self.fields.get(field_name)
        if not isinstance(value, list):
            return 0
        return len(value)

    @property
    def short_prompt(self) -> str:
        prompt = self.prompt or "No prompt"
        return prompt[:PROMPT_PREVIEW_LENGTH] + "..."
