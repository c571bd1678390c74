from pathlib import Path

from resume_review.analysis.exceptions import PromptTemplateError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"
TEXT_SLOT = "{document_text}"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the review prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled review_prompt.txt.

    Returns:
        The raw template string with a single ``{document_text}`` slot.

    Raises:
        PromptTemplateError: if the file cannot be read or has no text slot.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "review_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load prompt template: {exc}") from exc
    if TEXT_SLOT not in template:
        raise PromptTemplateError(f"Prompt template {path} has no {TEXT_SLOT} slot")
    return template
