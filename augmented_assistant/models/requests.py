from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Expertise(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class Tone(str, Enum):
    FORMAL = "formal"
    FRIENDLY = "friendly"


def blank_to_none(value):
    """Form inputs send empty strings for untouched fields; treat them as missing."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuestionRequest(CamelModel):
    """Request containing only a user question."""
    question: str

    @field_validator("question", mode="before")
    @classmethod
    def question_required(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("Question is required.")
        return value

    @field_validator("question")
    @classmethod
    def strip_question(cls, value: str) -> str:
        return value.strip()


class AssistantRequest(QuestionRequest):
    """Question with the optional CAG profile, KAG fact and RAG document."""
    user_age: Optional[int] = Field(default=None, ge=0)
    user_expertise: Expertise = Expertise.BEGINNER
    preferred_tone: Tone = Tone.FRIENDLY
    provided_fact: Optional[str] = None
    document_content: Optional[str] = None

    @field_validator("user_age", "provided_fact", "document_content", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        return blank_to_none(value)

    @field_validator("user_expertise", "preferred_tone", mode="before")
    @classmethod
    def blank_as_default(cls, value, info):
        if blank_to_none(value) is None:
            return cls.model_fields[info.field_name].default
        return value


class ContextAwareRequest(QuestionRequest):
    """Request where the whole user profile is mandatory."""
    age: int = Field(ge=0)
    expertise_level: Expertise
    tone: Tone
    rag_content: Optional[str] = None
    kag_fact: Optional[str] = None

    @field_validator("rag_content", "kag_fact", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        return blank_to_none(value)

    def to_assistant_request(self) -> AssistantRequest:
        return AssistantRequest(
            question=self.question,
            user_age=self.age,
            user_expertise=self.expertise_level,
            preferred_tone=self.tone,
            provided_fact=self.kag_fact,
            document_content=self.rag_content,
        )


class KnowledgeRequest(QuestionRequest):
    """Request with an optional user fact and the base knowledge to draw on."""
    provided_fact: Optional[str] = None
    model_knowledge: str

    @field_validator("provided_fact", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        return blank_to_none(value)

    @field_validator("model_knowledge")
    @classmethod
    def knowledge_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Model knowledge is required.")
        return value
