from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from db.models import CompletionStatus

STATUS_LABELS = {
    CompletionStatus.completed: "Completed",
    CompletionStatus.in_progress: "In progress",
    CompletionStatus.failed: "Failed",
}


class ExtractedVariables(BaseModel):
    """
    Fields inferred from the interview. Each one is independently optional and
    a missing field is never the same as ``False``: the filter relies on that.

    Values of the wrong type are dropped to ``None`` instead of being coerced
    (``"yes"`` is not a boolean here).
    """
    model_config = ConfigDict(extra="ignore")

    is_woman: Optional[bool] = None
    favorite_food: Optional[str] = None
    food_reason: Optional[str] = None

    @field_validator("is_woman", mode="before")
    @classmethod
    def _strict_bool(cls, v: Any):
        return v if isinstance(v, bool) else None

    @field_validator("favorite_food", "food_reason", mode="before")
    @classmethod
    def _text_or_none(cls, v: Any):
        return v if isinstance(v, str) else None

    @property
    def has_gender(self) -> bool:
        return self.is_woman is not None

    @property
    def has_any(self) -> bool:
        # the summary strip is driven by gender or food, a lone reason is not enough
        return self.has_gender or bool(self.favorite_food)

    @classmethod
    def parse_loose(cls, raw: Any) -> Optional["ExtractedVariables"]:
        if not isinstance(raw, dict):
            return None
        return cls.model_validate(raw)


class TranscriptMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str = "unknown"
    message: str = Field(validation_alias=AliasChoices("message", "content", "text"))

    @property
    def speaker(self) -> str:
        if self.role in ("agent", "assistant", "bot"):
            return "Agent"
        if self.role == "user":
            return "Participant"
        return self.role.capitalize()


def parse_transcript(raw: Any) -> List[TranscriptMessage]:
    """Keep the well-formed entries, in order. Anything else is skipped."""
    if not isinstance(raw, list):
        return []
    out: List[TranscriptMessage] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        text = entry.get("message", entry.get("content", entry.get("text")))
        if not isinstance(text, str):
            continue
        role = entry.get("role")
        out.append(TranscriptMessage(role=role if isinstance(role, str) and role else "unknown", message=text))
    return out


class InterviewOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    call_id: str
    participant_id: Optional[str] = None
    created_at: datetime
    duration: int = 0
    # known values normalised to CompletionStatus values, anything else kept as stored
    completion_status: str
    transcript: List[TranscriptMessage] = Field(default_factory=list)
    extracted_variables: Optional[ExtractedVariables] = None

    @field_validator("transcript", mode="before")
    @classmethod
    def _loose_transcript(cls, v: Any):
        return parse_transcript(v)

    @field_validator("extracted_variables", mode="before")
    @classmethod
    def _loose_vars(cls, v: Any):
        if isinstance(v, ExtractedVariables):
            return v
        return ExtractedVariables.parse_loose(v)

    @field_validator("completion_status", mode="before")
    @classmethod
    def _known_status(cls, v: Any):
        status = CompletionStatus.parse(v)
        if status is not None:
            return status.value
        return v if isinstance(v, str) and v.strip() else "unknown"

    @property
    def status(self) -> Optional[CompletionStatus]:
        return CompletionStatus.parse(self.completion_status)

    @property
    def status_label(self) -> str:
        status = self.status
        if status is None:
            return self.completion_status
        return STATUS_LABELS[status]

    @field_validator("duration", mode="before")
    @classmethod
    def _non_negative(cls, v: Any):
        if v is None:
            return 0
        return max(0, int(v))


class InterviewDetailOut(InterviewOut):
    date: str
    time: str
    duration_text: str
