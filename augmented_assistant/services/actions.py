import logging
from typing import Any, Callable, Dict, List, Mapping, Type

from pydantic import BaseModel, ValidationError

from augmented_assistant.core import templates
from augmented_assistant.models.answers import ActionResult, GeneratedAnswer, TailoredResponse
from augmented_assistant.models.requests import (
    AssistantRequest,
    ContextAwareRequest,
    KnowledgeRequest,
    QuestionRequest,
)
from augmented_assistant.services.prompt_composer import (
    compose_knowledge_prompt,
    compose_prompt,
    detect_sections,
)
from augmented_assistant.services.response_generator import GenerationError, ResponseGenerator

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate an answer. Please try again."


def field_errors_from(errors: List[dict]) -> Dict[str, str]:
    """Map each failing wire field to its first error message."""
    field_errors = {}
    for err in errors:
        field = next((part for part in err["loc"] if isinstance(part, str)), "request")
        cause = err.get("ctx", {}).get("error")
        field_errors.setdefault(field, str(cause) if cause else err["msg"])
    return field_errors


def validation_failure(errors: List[dict]) -> ActionResult:
    field_errors = field_errors_from(errors)
    logger.info(f"Rejected submission, invalid fields: {sorted(field_errors)}")
    return ActionResult(
        success=False,
        error="Invalid input: " + ", ".join(field_errors),
        field_errors=field_errors,
    )


def _run_flow(
    values: Mapping[str, Any],
    request_model: Type[QuestionRequest],
    compose: Callable[[Any], str],
    system_instructions: str,
    output_schema: Type[BaseModel],
    generator: ResponseGenerator,
) -> ActionResult:
    try:
        request = request_model.model_validate(values)
    except ValidationError as e:
        return validation_failure(e.errors())

    prompt = compose(request)
    try:
        answer = generator.generate(prompt, system_instructions, output_schema)
    except GenerationError as e:
        logger.error(f"{request_model.__name__} failed: {e}")
        return ActionResult(success=False, error=GENERIC_FAILURE)

    return ActionResult(success=True, answer=answer)


def _compose_logged(request: AssistantRequest) -> str:
    prompt = compose_prompt(request)
    logger.info(f"Question submitted with sections: {sorted(detect_sections(prompt))}")
    return prompt


def submit_question(values: Mapping[str, Any], generator: ResponseGenerator) -> ActionResult:
    """
    Validate a form submission, compose the prompt and ask the model.

    Args:
        values (Mapping[str, Any]): Raw form values keyed by wire field name.
        generator (ResponseGenerator): Model wrapper used for the single outbound call.

    Returns:
        ActionResult: The answer on success, otherwise the error (and failing fields).
    """
    return _run_flow(
        values,
        AssistantRequest,
        _compose_logged,
        templates.ASSISTANT_SYSTEM_INSTRUCTIONS,
        GeneratedAnswer,
        generator,
    )


def submit_context_aware(values: Mapping[str, Any], generator: ResponseGenerator) -> ActionResult:
    """Answer with a mandatory user profile."""
    return _run_flow(
        values,
        ContextAwareRequest,
        lambda request: _compose_logged(request.to_assistant_request()),
        templates.CONTEXT_AWARE_SYSTEM_INSTRUCTIONS,
        TailoredResponse,
        generator,
    )


def submit_knowledge(values: Mapping[str, Any], generator: ResponseGenerator) -> ActionResult:
    return _run_flow(
        values,
        KnowledgeRequest,
        compose_knowledge_prompt,
        templates.KNOWLEDGE_SYSTEM_INSTRUCTIONS,
        GeneratedAnswer,
        generator,
    )
