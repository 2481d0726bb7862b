import re
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Tuple

from augmented_assistant.core import templates
from augmented_assistant.models.requests import AssistantRequest, Expertise, KnowledgeRequest, Tone


@dataclass(frozen=True)
class PromptSection:
    """A named block of the prompt, rendered only when its inputs are present."""
    name: str
    header: str
    render: Callable[[AssistantRequest], Optional[List[str]]]


def delimiters(tag: str, text: str) -> Tuple[str, str]:
    """
    Opening and closing tags for a piece of user text.

    The tag gets a number when the text already contains its closing form, so
    the closing tag returned never occurs inside the text. Only the text itself
    decides the tags.
    """
    label = tag
    number = 0
    while f"</{label}>" in text:
        number += 1
        label = f"{tag} {number}"
    return f"<{label}>", f"</{label}>"


def _question_lines(request: AssistantRequest) -> List[str]:
    open_tag, close_tag = delimiters(templates.QUESTION_TAG, request.question)
    return [open_tag, request.question, close_tag]


def _profile_lines(request: AssistantRequest) -> Optional[List[str]]:
    profile = []
    if request.user_age is not None:
        profile.append(templates.AGE_LINE.format(age=request.user_age))
    if request.user_expertise is not None:
        profile.append(templates.EXPERTISE_LINE.format(expertise=request.user_expertise.value))
    if request.preferred_tone is not None:
        profile.append(templates.TONE_LINE.format(tone=request.preferred_tone.value))
    if not profile:
        return None

    adjustments = []
    if request.user_age is not None and request.user_age < templates.CHILD_AGE_LIMIT:
        adjustments.append(templates.CHILD_INSTRUCTION)
    if request.user_expertise == Expertise.EXPERT:
        adjustments.append(templates.EXPERT_INSTRUCTION)
    if request.preferred_tone == Tone.FRIENDLY:
        adjustments.append(templates.FRIENDLY_INSTRUCTION)
    if adjustments:
        profile += ["", templates.ADJUSTMENTS_INTRO, *adjustments]
    return profile


def _document_lines(request: AssistantRequest) -> Optional[List[str]]:
    if not request.document_content:
        return None
    open_tag, close_tag = delimiters(templates.DOCUMENT_TAG, request.document_content)
    return [
        templates.DOCUMENT_INTRO,
        open_tag,
        request.document_content,
        close_tag,
        templates.DOCUMENT_INSTRUCTION,
    ]


def _fact_lines(request: AssistantRequest) -> Optional[List[str]]:
    if not request.provided_fact:
        return None
    open_tag, close_tag = delimiters(templates.FACT_TAG, request.provided_fact)
    return [
        templates.FACT_LINE.format(open=open_tag, fact=request.provided_fact, close=close_tag),
        templates.FACT_INSTRUCTION,
    ]


# Order is the order of appearance in the prompt.
SECTIONS = (
    PromptSection("question", templates.QUESTION_HEADER, _question_lines),
    PromptSection("profile", templates.PROFILE_HEADER, _profile_lines),
    PromptSection("document", templates.DOCUMENT_HEADER, _document_lines),
    PromptSection("fact", templates.FACT_HEADER, _fact_lines),
)


def render_section(section: PromptSection, request: AssistantRequest) -> Optional[str]:
    lines = section.render(request)
    if lines is None:
        return None
    return "\n".join([section.header, *lines])


def compose_prompt(request: AssistantRequest) -> str:
    """
    Build the user prompt for a question and its optional augmentations.

    Each section renders from its own fields only, so adding or removing one
    optional input leaves the text of every other section untouched.

    Args:
        request (AssistantRequest): Validated request.

    Returns:
        str: The prompt to send to the model.
    """
    blocks = [render_section(section, request) for section in SECTIONS]
    blocks = [block for block in blocks if block is not None]
    blocks.append(templates.ANSWER_CUE)
    return "\n\n".join(blocks)


def compose_knowledge_prompt(request: KnowledgeRequest) -> str:
    """Build the prompt of the knowledge flow, which always carries the model knowledge."""
    if request.provided_fact:
        fact_block = templates.PROVIDED_FACT_TEMPLATE.format(fact=request.provided_fact)
    else:
        fact_block = templates.NO_FACT_TEMPLATE

    return "\n\n".join([
        f"{templates.QUESTION_HEADER}\n{request.question}",
        fact_block,
        templates.MODEL_KNOWLEDGE_TEMPLATE.format(model_knowledge=request.model_knowledge),
        templates.ANSWER_CUE,
    ])


_OPEN_TAG = re.compile(
    r"<(" + "|".join([templates.QUESTION_TAG, templates.DOCUMENT_TAG, templates.FACT_TAG]) + r")( \d+)?>"
)


def strip_user_text(prompt: str) -> str:
    """Remove every tagged span of user text, leaving only the template skeleton."""
    skeleton = []
    position = 0
    while True:
        match = _OPEN_TAG.search(prompt, position)
        if match is None:
            break
        # The first tag after template text is always a real one.
        close_tag = f"</{match.group(1)}{match.group(2) or ''}>"
        end = prompt.find(close_tag, match.end())
        if end == -1:
            break
        skeleton.append(prompt[position:match.start()])
        position = end + len(close_tag)
    skeleton.append(prompt[position:])
    return "".join(skeleton)


def detect_sections(prompt: str) -> FrozenSet[str]:
    """
    Report which sections a composed prompt contains.

    User supplied question, document and fact text is skipped, so text that
    quotes a section header is not mistaken for that section.

    Args:
        prompt (str): A prompt produced by compose_prompt.

    Returns:
        FrozenSet[str]: Names of the sections found.
    """
    skeleton = strip_user_text(prompt)
    lines = {line.strip() for line in skeleton.splitlines()}
    return frozenset(section.name for section in SECTIONS if section.header in lines)
