"""Prompts used by the real-time conversation channel."""

QUESTION_PROMPT = (
    "You are a helpful assistant that asks questions on a specific topic. "
    "Ask me a question about a random topic."
)

QUESTION_ERROR_MESSAGE = "Failed to generate question"
