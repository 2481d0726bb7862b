ASSISTANT_SYSTEM_INSTRUCTIONS = """
You are a helpful Q&A assistant that answers questions based on provided documents, user context, and optional facts.

Instructions:
- Answer the question using the document content (if available), the user context, and the provided fact (if available).
- Mention when content is being used from the uploaded document or when the injected fact is being used.
- Keep the answer focused on the question.
"""

CONTEXT_AWARE_SYSTEM_INSTRUCTIONS = """
You are an AI assistant that provides answers tailored to the user's context.

Instructions:
- Follow the adjustments listed for the user's profile.
- Incorporate the fact, if provided, into your answer to increase factual accuracy. You can cite it inline.
"""

KNOWLEDGE_SYSTEM_INSTRUCTIONS = """
You are an AI assistant. Answer the user's question using your own knowledge and any provided facts.
"""

# ===========================
# SECTION HEADERS
# ===========================
QUESTION_HEADER = "Question:"
PROFILE_HEADER = "Context-Aware Generation (CAG):"
DOCUMENT_HEADER = "Retrieval-Augmented Generation (RAG):"
FACT_HEADER = "Knowledge-Augmented Generation (KAG):"
ANSWER_CUE = "Answer:"

# User text is wrapped in <tag>...</tag>, tag numbered when the text contains its closing form.
QUESTION_TAG = "question"
DOCUMENT_TAG = "document"
FACT_TAG = "fact"

# ===========================
# PROFILE (CAG)
# ===========================
AGE_LINE = "- The user's age is: {age}"
EXPERTISE_LINE = "- The user's expertise level is: {expertise}"
TONE_LINE = "- The preferred tone is: {tone}"

ADJUSTMENTS_INTRO = "Based on this context, adjust your response accordingly:"
CHILD_INSTRUCTION = "- The user is a child, so simplify the language for children and use examples."
EXPERT_INSTRUCTION = "- The user is an expert, so use technical terms and precise technical language."
FRIENDLY_INSTRUCTION = "- The tone is friendly, so make the answer casual and conversational."

CHILD_AGE_LIMIT = 13

# ===========================
# DOCUMENT (RAG)
# ===========================
DOCUMENT_INTRO = "According to the uploaded document:"
DOCUMENT_INSTRUCTION = (
    "Ground your answer in the document above and mention that you are using "
    "content from the uploaded document."
)

# ===========================
# FACT (KAG)
# ===========================
FACT_LINE = "Fact: {open}{fact}{close}"
FACT_INSTRUCTION = "Incorporate this fact into your answer and cite it inline when you use it."

# ===========================
# KNOWLEDGE FLOW
# ===========================
PROVIDED_FACT_TEMPLATE = """Fact provided by the user: {fact}
Incorporate this fact directly into your answer and cite it appropriately, if needed."""

NO_FACT_TEMPLATE = "No fact was provided. Use your own model knowledge to answer the question."

MODEL_KNOWLEDGE_TEMPLATE = """Here is some additional knowledge that you can use to answer the question:
{model_knowledge}"""
