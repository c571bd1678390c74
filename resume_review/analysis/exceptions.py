class AnalysisProviderError(Exception):
    """Raised by provider clients; the message carries the upstream error text."""


class PromptTemplateError(Exception):
    """Raised when the review prompt template cannot be loaded or is malformed."""
