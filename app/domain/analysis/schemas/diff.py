from typing import Literal

from pydantic import Field

from app.domain.analysis.constants import DIFF_SAMPLE_MAX_LINES, UNKNOWN_FILE_NAME
from app.domain.analysis.schemas.base import FrozenModel

FileStatus = Literal["added", "modified", "deleted", "renamed"]
LineKind = Literal["addition", "deletion", "context"]


class DiffLine(FrozenModel):
    """diff 한 줄 - content는 +/-/공백 마커가 제거된 상태"""

    kind: LineKind
    content: str
    line_number: int | None = None


class DiffHunk(FrozenModel):
    """@@ 헤더로 시작하는 연속된 변경 블록"""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    section: str = ""
    lines: list[DiffLine] = Field(default_factory=list)


class ParsedFile(FrozenModel):
    """diff에서 파싱된 파일 단위 변경 내역

    추가된 파일은 old_path가, 삭제된 파일은 new_path가 None이다.
    """

    old_path: str | None = None
    new_path: str | None = None
    hunks: list[DiffHunk] = Field(default_factory=list)
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)

    @property
    def path(self) -> str:
        return self.new_path or self.old_path or UNKNOWN_FILE_NAME

    @property
    def changes(self) -> int:
        return self.additions + self.deletions


class FileChange(FrozenModel):
    """파일별 변경 통계"""

    path: str
    additions: int = Field(ge=0)
    deletions: int = Field(ge=0)
    status: FileStatus


class DiffSample(FrozenModel):
    """영상과 프롬프트에 쓰이는 대표 파일의 diff 발췌"""

    file_name: str = UNKNOWN_FILE_NAME
    lines: list[DiffLine] = Field(default_factory=list, max_length=DIFF_SAMPLE_MAX_LINES)
