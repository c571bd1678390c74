from abc import ABC, abstractmethod

from resume_review.analysis.models import AnalysisResult


class BaseAnalyzer(ABC):
    """Contract for document analysis adapters."""

    @abstractmethod
    async def analyze(self, text: str) -> AnalysisResult:
        """Produce reviewer feedback for extracted document text.

        Args:
            text: Flattened document text; may be empty.

        Returns:
            AnalysisResult with emphasis markup stripped.

        Raises:
            AuthFailure: provider rejected the credentials.
            RateLimited: provider quota or rate limit exhausted.
            UpstreamFailure: any other provider failure.
        """

    async def aclose(self) -> None:
        """Release resources held by the analyzer's provider client."""
        return None
