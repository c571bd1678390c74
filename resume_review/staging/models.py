from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StagedDocument:
    """Handle to an uploaded payload written to transient storage."""

    id: str
    path: Path
