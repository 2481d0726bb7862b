import os

# Settings are read at import time; give them what they need before the app loads.
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("ANSWER_LLM", "gpt-4o-mini")

from unittest.mock import MagicMock

import pytest

GENERATED_TEXT = "Generated answer."


@pytest.fixture
def mock_llm():
    """
    Chat model mock. Each structured runnable it hands out fills the single
    field of the requested schema and is kept in `llm.runnables`.
    """
    llm = MagicMock()
    llm.runnables = []

    def with_structured_output(schema):
        field_name = next(iter(schema.model_fields))
        runnable = MagicMock()
        runnable.invoke.return_value = schema(**{field_name: GENERATED_TEXT})
        llm.runnables.append(runnable)
        return runnable

    llm.with_structured_output.side_effect = with_structured_output
    return llm
