from app.domain.analysis.schemas.analysis import (
    AIAnalysis,
    AnalysisRecord,
    AnalysisState,
    NarrationResult,
)
from app.domain.analysis.schemas.diff import (
    DiffHunk,
    DiffLine,
    DiffSample,
    FileChange,
    FileStatus,
    LineKind,
    ParsedFile,
)
from app.domain.analysis.schemas.github import PRMetadata, PRReference

__all__ = [
    "PRReference",
    "PRMetadata",
    "DiffLine",
    "DiffHunk",
    "ParsedFile",
    "FileChange",
    "FileStatus",
    "LineKind",
    "DiffSample",
    "AIAnalysis",
    "NarrationResult",
    "AnalysisRecord",
    "AnalysisState",
]
