"""LLM-backed document reviewer."""

from pathlib import Path

from resume_review.analysis.base import BaseAnalyzer
from resume_review.analysis.classifier import classify_upstream_error
from resume_review.analysis.client_base import BaseAnalysisClient
from resume_review.analysis.exceptions import AnalysisProviderError
from resume_review.analysis.models import AnalysisPrompt, AnalysisResult
from resume_review.analysis.prompt_loader import load_prompt_template
from resume_review.ingestion.exceptions import UpstreamFailure
from resume_review.logging.logger import Log


class Analyzer(BaseAnalyzer):
    """Sends extracted text to a text-generation provider and cleans the reply.

    A single request is made per call; retries are left to the caller.
    """

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.7,
        prompt_template_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(2.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)

    async def analyze(self, text: str) -> AnalysisResult:
        """Review the document text and return markup-stripped feedback."""
        prompt = self.build_prompt(text)
        Log.debug(f"Analysis prompt built ({len(prompt)} chars)")

        try:
            reply = await self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except AnalysisProviderError as exc:
            raise classify_upstream_error(str(exc)) from exc
        except Exception as exc:
            raise UpstreamFailure(f"Unclassified analysis error: {exc}") from exc

        Log.debug(f"Analysis reply received ({len(reply)} chars)")
        return AnalysisResult.from_reply(reply)

    def build_prompt(self, text: str) -> str:
        return AnalysisPrompt(template=self._prompt_template, document_text=text).render()

    async def aclose(self) -> None:
        await self._client.close()
