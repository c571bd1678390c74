"""Offline analysis client.

Returns fixed feedback without network calls. Selected with
``ANALYSIS_PROVIDER=example`` for local development and tests.
"""

from typing import ClassVar

from resume_review.analysis.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Adapter that answers every prompt with the same canned review."""

    DEFAULT_RESPONSE: ClassVar[str] = (
        "**1. Overall Structure and Format**\n"
        "The document is readable and sections are clearly separated.\n\n"
        "**5. Specific Recommendations**\n"
        "* Quantify achievements where possible."
    )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return self.DEFAULT_RESPONSE
