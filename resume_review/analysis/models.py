from dataclasses import dataclass

EMPHASIS_MARKUP = "*"


@dataclass(frozen=True)
class AnalysisPrompt:
    """Fixed reviewer template with the document text in its slot."""

    template: str
    document_text: str

    def render(self) -> str:
        return self.template.format(document_text=self.document_text)


@dataclass(frozen=True)
class AnalysisResult:
    """Feedback text returned to the caller, emphasis markup removed."""

    text: str

    @classmethod
    def from_reply(cls, reply: str) -> "AnalysisResult":
        return cls(text=reply.replace(EMPHASIS_MARKUP, ""))
