from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from augmented_assistant.api import assistant
from augmented_assistant.core.config import config
from augmented_assistant.core.logging_config import setup_logging
from augmented_assistant.services.actions import validation_failure

setup_logging(config.log_level)

app = FastAPI(title="Augmented Q&A Assistant API", version="1.0.0")

app.include_router(assistant.router, prefix="/api/assistant")

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Bodies that are not JSON objects get the same envelope as invalid fields."""
    # Drop the leading "body"/"query" part of each location.
    errors = [{**err, "loc": tuple(err["loc"][1:])} for err in exc.errors()]
    return JSONResponse(status_code=422, content=validation_failure(errors).to_payload())

@app.get("/")
def health_check():
    return {"status": "OK", "service": "Augmented Q&A Assistant API"}
