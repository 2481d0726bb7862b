"""
Tests for request validation: required question, age coercion,
closed expertise/tone values and blank optional fields.
"""
import pytest
from pydantic import ValidationError

from augmented_assistant.models.requests import (
    AssistantRequest,
    ContextAwareRequest,
    Expertise,
    KnowledgeRequest,
    Tone,
)


class TestAssistantRequest:

    def test_defaults(self):
        request = AssistantRequest.model_validate({"question": "What is RAG?"})

        assert request.user_age is None
        assert request.user_expertise is Expertise.BEGINNER
        assert request.preferred_tone is Tone.FRIENDLY
        assert request.provided_fact is None
        assert request.document_content is None

    def test_camel_case_wire_names(self):
        request = AssistantRequest.model_validate({
            "question": "Q?",
            "userAge": 30,
            "userExpertise": "intermediate",
            "preferredTone": "formal",
            "providedFact": "A fact.",
            "documentContent": "A document.",
        })

        assert request.user_age == 30
        assert request.user_expertise is Expertise.INTERMEDIATE
        assert request.preferred_tone is Tone.FORMAL
        assert request.provided_fact == "A fact."
        assert request.document_content == "A document."

    @pytest.mark.parametrize("question", ["", "   ", None])
    def test_empty_question_rejected(self, question):
        with pytest.raises(ValidationError) as exc_info:
            AssistantRequest.model_validate({"question": question})

        assert exc_info.value.errors()[0]["loc"] == ("question",)

    def test_missing_question_rejected(self):
        with pytest.raises(ValidationError):
            AssistantRequest.model_validate({"userAge": 9})

    def test_question_is_stripped(self):
        assert AssistantRequest(question="  Hi?  ").question == "Hi?"

    def test_age_coerced_from_text(self):
        assert AssistantRequest.model_validate({"question": "Q?", "userAge": "8"}).user_age == 8

    def test_blank_age_is_missing(self):
        assert AssistantRequest.model_validate({"question": "Q?", "userAge": ""}).user_age is None

    @pytest.mark.parametrize("age", ["-1", "ten", -3])
    def test_invalid_age_rejected(self, age):
        with pytest.raises(ValidationError) as exc_info:
            AssistantRequest.model_validate({"question": "Q?", "userAge": age})

        assert exc_info.value.errors()[0]["loc"] == ("userAge",)

    @pytest.mark.parametrize("field,value", [
        ("userExpertise", "guru"),
        ("userExpertise", "Expert"),
        ("preferredTone", "sarcastic"),
    ])
    def test_unknown_enum_values_rejected(self, field, value):
        """Unrecognized values are errors, never coerced to a default."""
        with pytest.raises(ValidationError) as exc_info:
            AssistantRequest.model_validate({"question": "Q?", field: value})

        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_blank_enums_fall_back_to_defaults(self):
        request = AssistantRequest.model_validate({
            "question": "Q?", "userExpertise": "", "preferredTone": None,
        })

        assert request.user_expertise is Expertise.BEGINNER
        assert request.preferred_tone is Tone.FRIENDLY

    def test_blank_fact_and_document_are_missing(self):
        request = AssistantRequest.model_validate({
            "question": "Q?", "providedFact": "  ", "documentContent": "",
        })

        assert request.provided_fact is None
        assert request.document_content is None


class TestContextAwareRequest:

    def test_profile_is_required(self):
        with pytest.raises(ValidationError) as exc_info:
            ContextAwareRequest.model_validate({"question": "Q?"})

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"age", "expertiseLevel", "tone"}

    def test_maps_to_assistant_request(self):
        request = ContextAwareRequest.model_validate({
            "question": "Q?",
            "age": 11,
            "expertiseLevel": "expert",
            "tone": "formal",
            "ragContent": "Doc.",
            "kagFact": "Fact.",
        })

        mapped = request.to_assistant_request()

        assert mapped.user_age == 11
        assert mapped.user_expertise is Expertise.EXPERT
        assert mapped.preferred_tone is Tone.FORMAL
        assert mapped.document_content == "Doc."
        assert mapped.provided_fact == "Fact."


class TestKnowledgeRequest:

    def test_model_knowledge_required(self):
        with pytest.raises(ValidationError):
            KnowledgeRequest.model_validate({"question": "Q?", "modelKnowledge": " "})

    def test_fact_optional(self):
        request = KnowledgeRequest.model_validate({"question": "Q?", "modelKnowledge": "K."})

        assert request.provided_fact is None
