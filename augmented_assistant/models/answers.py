from typing import Dict, Optional
from pydantic import BaseModel, Field

from augmented_assistant.models.requests import CamelModel


class GeneratedAnswer(BaseModel):
    """Output schema declared to the model for the assistant and knowledge flows."""
    answer: str = Field(
        description="The AI-generated answer to the question, incorporating the document content and the provided fact when given."
    )


class TailoredResponse(BaseModel):
    """Output schema declared to the model for the context-aware flow."""
    response: str = Field(description="The generated response tailored to the user context.")


class ActionResult(CamelModel):
    success: bool
    answer: Optional[str] = None
    error: Optional[str] = None
    field_errors: Optional[Dict[str, str]] = None

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
