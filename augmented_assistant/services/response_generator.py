import logging
from typing import Type
from langchain_core.language_models import BaseChatModel
from pydantic import BaseModel, ValidationError

from augmented_assistant.models.answers import GeneratedAnswer

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when the model call fails or returns an unusable answer."""
    pass


class ResponseGenerator:
    def __init__(self, llm: BaseChatModel):
        self._llm = llm

    def generate(
        self,
        prompt: str,
        system_instructions: str,
        output_schema: Type[BaseModel] = GeneratedAnswer,
    ) -> str:
        """
        Send a composed prompt to the model and return its normalized answer.

        Args:
            prompt (str): Prompt built by the prompt composer.
            system_instructions (str): System message for the flow.
            output_schema (Type[BaseModel]): Schema with a single text field the model must fill.

        Returns:
            str: The answer text, stripped.

        Raises:
            GenerationError: If the model call fails or the answer is empty.
        """
        # Output schemas declare exactly one text field.
        field_name = next(iter(output_schema.model_fields))

        messages = [
            {"role": "system", "content": system_instructions},
            {"role": "user", "content": prompt},
        ]
        try:
            structured_llm = self._llm.with_structured_output(output_schema)
            output = structured_llm.invoke(messages)
            if not isinstance(output, output_schema):
                output = output_schema.model_validate(output)
        except ValidationError as e:
            logger.error(f"Model output does not match {output_schema.__name__}: {e}")
            raise GenerationError("Model returned a malformed answer") from e
        except Exception as e:
            logger.exception("Model call failed")
            raise GenerationError(str(e)) from e

        answer = (getattr(output, field_name) or "").strip()
        if not answer:
            logger.error("Model returned an empty answer")
            raise GenerationError("Model returned an empty answer")

        logger.info(f"Answer generated: {len(answer)} characters")
        return answer
