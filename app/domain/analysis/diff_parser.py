import re
from dataclasses import dataclass, field

from app.core.exceptions import MalformedDiffError
from app.core.logging import get_logger
from app.domain.analysis.schemas import (
    DiffHunk,
    DiffLine,
    FileChange,
    FileStatus,
    ParsedFile,
)

logger = get_logger(__name__)

DEV_NULL = "/dev/null"

GIT_HEADER = "diff --git "
# git은 특수 문자가 있는 경로를 C 스타일 따옴표로 감싼다
QUOTED_PATH = r'"(?:[^"\\]|\\.)*"'
QUOTED_HEADER_PATTERN = re.compile(rf"^({QUOTED_PATH}|.+?) ({QUOTED_PATH}|.+)$")
PREFIXED_HEADER_PATTERN = re.compile(r"^a/(.+) b/(.+)$")
HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$")


@dataclass
class _HunkBuilder:
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    section: str
    old_remaining: int
    new_remaining: int
    old_cursor: int
    new_cursor: int
    lines: list[DiffLine] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.old_remaining > 0 or self.new_remaining > 0

    def consume(self, line: str) -> bool:
        """hunk 본문 한 줄 처리, 본문이 아니면 False"""
        marker, content = line[:1], line[1:]
        if marker == "+":
            self.lines.append(DiffLine(kind="addition", content=content, line_number=self.new_cursor))
            self.new_cursor += 1
            self.new_remaining -= 1
        elif marker == "-":
            self.lines.append(DiffLine(kind="deletion", content=content, line_number=self.old_cursor))
            self.old_cursor += 1
            self.old_remaining -= 1
        elif marker == " " or line == "":
            self.lines.append(DiffLine(kind="context", content=content, line_number=self.new_cursor))
            self.old_cursor += 1
            self.new_cursor += 1
            self.old_remaining -= 1
            self.new_remaining -= 1
        else:
            return False
        return True

    def build(self) -> DiffHunk:
        return DiffHunk(
            old_start=self.old_start,
            old_lines=self.old_lines,
            new_start=self.new_start,
            new_lines=self.new_lines,
            section=self.section,
            lines=self.lines,
        )


@dataclass
class _FileBuilder:
    old_path: str | None = None
    new_path: str | None = None
    seen_old_header: bool = False
    hunks: list[_HunkBuilder] = field(default_factory=list)

    def build(self) -> ParsedFile:
        hunks = [hunk.build() for hunk in self.hunks]
        lines = [line for hunk in hunks for line in hunk.lines]
        return ParsedFile(
            old_path=self.old_path,
            new_path=self.new_path,
            hunks=hunks,
            additions=sum(1 for line in lines if line.kind == "addition"),
            deletions=sum(1 for line in lines if line.kind == "deletion"),
        )


def _unquote(path: str) -> str:
    """git 따옴표 경로 복원, 비 ASCII 문자는 8진수 UTF-8 바이트로 인코딩되어 있음"""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path
    inner = path[1:-1]
    try:
        return inner.encode("ascii").decode("unicode_escape").encode("latin-1").decode("utf-8")
    except UnicodeError:
        logger.warning("따옴표 경로 복원 실패 path=%s", path)
        return inner


def _strip_prefix(path: str) -> str:
    return path[2:] if path.startswith(("a/", "b/")) else path


def _split_git_header(rest: str) -> tuple[str, str] | None:
    """diff --git 뒤의 이전/이후 경로 분리

    공백이 든 경로는 따옴표 없이 나오므로 양쪽이 같은 경로인 대칭 분할을 먼저 본다.
    이름 변경은 rename from/to 줄이 경로를 다시 정한다.
    """
    if '"' in rest:
        match = QUOTED_HEADER_PATTERN.match(rest)
        if match:
            return _strip_prefix(_unquote(match.group(1))), _strip_prefix(_unquote(match.group(2)))

    half = len(rest) // 2
    if rest[half : half + 1] == " ":
        old, new = _strip_prefix(rest[:half]), _strip_prefix(rest[half + 1 :])
        if old == new:
            return old, new

    match = PREFIXED_HEADER_PATTERN.match(rest)
    if match:
        return match.group(1), match.group(2)

    parts = rest.split(" ")
    if len(parts) == 2:
        return parts[0], parts[1]
    return None


def _parse_header_path(value: str) -> str | None:
    """--- / +++ 헤더의 경로 추출, /dev/null은 None"""
    path = _unquote(value.split("\t", 1)[0].strip())
    if path == DEV_NULL:
        return None
    return _strip_prefix(path) or None


def parse_unified_diff(diff_text: str) -> list[ParsedFile]:
    """unified diff 텍스트를 파일 단위로 파싱

    Args:
        diff_text: git diff 또는 일반 unified diff 텍스트

    Returns:
        diff 순서대로 정렬된 파일 목록

    Raises:
        MalformedDiffError: 파일 섹션을 하나도 찾지 못했거나 파일 밖에 hunk가 있는 경우
    """
    if not diff_text or not diff_text.strip():
        raise MalformedDiffError("빈 diff")

    files: list[_FileBuilder] = []
    current: _FileBuilder | None = None
    hunk: _HunkBuilder | None = None

    for line_no, line in enumerate(diff_text.splitlines(), start=1):
        if hunk is not None and hunk.is_open:
            if line.startswith("\\"):
                continue
            if hunk.consume(line):
                continue
            hunk = None

        if line.startswith(GIT_HEADER):
            current = _FileBuilder()
            paths = _split_git_header(line[len(GIT_HEADER) :])
            if paths:
                current.old_path, current.new_path = paths
            files.append(current)
            hunk = None
        elif line.startswith("--- "):
            if current is None or current.hunks or current.seen_old_header:
                current = _FileBuilder()
                files.append(current)
            current.old_path = _parse_header_path(line[4:])
            current.seen_old_header = True
            hunk = None
        elif line.startswith("+++ ") and current is not None:
            current.new_path = _parse_header_path(line[4:])
        elif line.startswith("new file mode") and current is not None:
            current.old_path = None
        elif line.startswith("deleted file mode") and current is not None:
            current.new_path = None
        elif line.startswith("rename from ") and current is not None:
            current.old_path = _unquote(line[len("rename from ") :].strip())
        elif line.startswith("rename to ") and current is not None:
            current.new_path = _unquote(line[len("rename to ") :].strip())
        elif line.startswith("@@"):
            match = HUNK_HEADER_PATTERN.match(line)
            if current is None or not match:
                raise MalformedDiffError(f"파일 섹션 밖의 hunk 헤더 line={line_no}")
            old_start, new_start = int(match.group(1)), int(match.group(3))
            old_lines = int(match.group(2)) if match.group(2) is not None else 1
            new_lines = int(match.group(4)) if match.group(4) is not None else 1
            hunk = _HunkBuilder(
                old_start=old_start,
                old_lines=old_lines,
                new_start=new_start,
                new_lines=new_lines,
                section=match.group(5).strip(),
                old_remaining=old_lines,
                new_remaining=new_lines,
                old_cursor=old_start,
                new_cursor=new_start,
            )
            current.hunks.append(hunk)

    if not files:
        raise MalformedDiffError("파일 섹션을 찾을 수 없음")

    parsed = [builder.build() for builder in files]
    logger.info(
        "diff 파싱 완료 files=%d hunks=%d",
        len(parsed),
        sum(len(f.hunks) for f in parsed),
    )
    return parsed


def classify_status(old_path: str | None, new_path: str | None) -> FileStatus:
    """이전/이후 경로로 파일 상태 결정"""
    if old_path is None:
        return "added"
    if new_path is None:
        return "deleted"
    if old_path != new_path:
        return "renamed"
    return "modified"


def to_file_change(parsed_file: ParsedFile) -> FileChange:
    """파싱된 파일을 통계용 FileChange로 변환"""
    return FileChange(
        path=parsed_file.path,
        additions=parsed_file.additions,
        deletions=parsed_file.deletions,
        status=classify_status(parsed_file.old_path, parsed_file.new_path),
    )
