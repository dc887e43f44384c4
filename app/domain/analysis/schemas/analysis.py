from typing import Literal, TypedDict

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domain.analysis.constants import MAX_KEY_FILES
from app.domain.analysis.schemas.base import FrozenModel
from app.domain.analysis.schemas.diff import DiffSample, FileChange, ParsedFile
from app.domain.analysis.schemas.github import PRMetadata, PRReference


class AIAnalysis(FrozenModel):
    """LLM 또는 휴리스틱이 내린 PR 판단

    LLM 응답을 스키마 검증 없이 받아들이므로 모든 필드에 기본값을 둔다.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    is_frontend: bool = False
    narration: str = ""
    key_files: list[str] = Field(default_factory=list)


class NarrationResult(FrozenModel):
    """나레이션 결과 - 모델 응답을 썼는지 휴리스틱 폴백을 썼는지 구분"""

    source: Literal["model", "fallback"]
    analysis: AIAnalysis

    @property
    def used_model(self) -> bool:
        return self.source == "model"


class AnalysisRecord(FrozenModel):
    """타임라인 구성에 넘겨지는 PR 분석 결과"""

    title: str
    pr_number: int
    repo_id: str
    author: str
    is_frontend: bool
    narration: str
    key_files: list[str] = Field(default_factory=list, max_length=MAX_KEY_FILES)
    total_additions: int = Field(ge=0)
    total_deletions: int = Field(ge=0)
    files: list[FileChange] = Field(default_factory=list)
    diff_sample: DiffSample = Field(default_factory=DiffSample)

    def to_json(self, indent: int | None = 2) -> str:
        """디버깅용 JSON 직렬화"""
        return self.model_dump_json(by_alias=True, indent=indent)


class AnalysisState(TypedDict, total=False):
    """LangGraph 분석 워크플로우 상태"""

    reference: PRReference
    github_token: str | None
    session_id: str | None
    metadata: PRMetadata
    raw_diff: str
    parsed_files: list[ParsedFile]
    file_changes: list[FileChange]
    diff_sample: DiffSample
    narration: NarrationResult
    record: AnalysisRecord
    error_code: str
    error_message: str
