from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the provider's reply as plain text.

        Raises:
            AnalysisProviderError: on any provider, network or timeout failure.
        """

    async def close(self) -> None:
        """Release network resources held by the client."""
        return None
