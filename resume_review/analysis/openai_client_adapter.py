import httpx
import openai

from resume_review.analysis.client_base import BaseAnalysisClient
from resume_review.analysis.exceptions import AnalysisProviderError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the async OpenAI-compatible chat API.

    One instance is created at startup and shared by all requests.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
            base_url=base_url,
        )

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=messages,
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise AnalysisProviderError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise AnalysisProviderError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnalysisProviderError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnalysisProviderError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnalysisProviderError("AI returned empty response")
        return content

    async def close(self) -> None:
        await self._client.close()
