from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse
from langchain_openai import ChatOpenAI

from augmented_assistant.core.config import config
from augmented_assistant.models.answers import ActionResult
from augmented_assistant.services.actions import submit_context_aware, submit_knowledge, submit_question
from augmented_assistant.services.document_reader import DocumentReader, DocumentReadError
from augmented_assistant.services.response_generator import ResponseGenerator

router = APIRouter()

def get_llm() -> ChatOpenAI:
    return ChatOpenAI(api_key=config.openai_api_key, model=config.answer_llm, temperature=config.temperature)

def get_generator(llm: ChatOpenAI = Depends(get_llm)) -> ResponseGenerator:
    return ResponseGenerator(llm)

def get_document_reader() -> DocumentReader:
    return DocumentReader()

def to_response(result: ActionResult) -> JSONResponse:
    if result.success:
        status_code = 200
    elif result.field_errors:
        status_code = 422
    else:
        status_code = 502
    return JSONResponse(status_code=status_code, content=result.to_payload())


@router.post("/ask")
def ask(values: Dict[str, Any] = Body(...), generator: ResponseGenerator = Depends(get_generator)):
    """
    Answer a question, optionally personalized, grounded in a document and
    augmented with a user fact.
    """
    return to_response(submit_question(values, generator))


@router.post("/ask/upload")
def ask_with_document(
        question: str = Form(""),
        user_age: Optional[str] = Form(None, alias="userAge"),
        user_expertise: Optional[str] = Form(None, alias="userExpertise"),
        preferred_tone: Optional[str] = Form(None, alias="preferredTone"),
        provided_fact: Optional[str] = Form(None, alias="providedFact"),
        document_content: Optional[str] = Form(None, alias="documentContent"),
        document: Optional[UploadFile] = File(None),
        reader: DocumentReader = Depends(get_document_reader),
        generator: ResponseGenerator = Depends(get_generator),
):
    """
    Same as /ask, from a multipart form. An uploaded document replaces
    documentContent and is read before anything is submitted.
    """
    if document is not None and document.filename:
        try:
            document_content = reader.run(document)
        except DocumentReadError as e:
            return JSONResponse(status_code=400, content=ActionResult(success=False, error=str(e)).to_payload())

    values = {
        "question": question,
        "userAge": user_age,
        "userExpertise": user_expertise,
        "preferredTone": preferred_tone,
        "providedFact": provided_fact,
        "documentContent": document_content,
    }
    return to_response(submit_question(values, generator))


@router.post("/context-aware")
def context_aware(values: Dict[str, Any] = Body(...), generator: ResponseGenerator = Depends(get_generator)):
    """
    Answer tailored to a complete user profile (age, expertise level and tone).
    """
    return to_response(submit_context_aware(values, generator))


@router.post("/knowledge")
def knowledge(values: Dict[str, Any] = Body(...), generator: ResponseGenerator = Depends(get_generator)):
    """
    Answer from supplied model knowledge and an optional user fact.
    """
    return to_response(submit_knowledge(values, generator))
