from app.core.logging import get_logger
from app.domain.analysis.constants import (
    DIFF_SAMPLE_MAX_LINES,
    FRONTEND_EXTENSIONS,
    SOURCE_EXTENSIONS,
    UNKNOWN_FILE_NAME,
)
from app.domain.analysis.schemas import DiffSample, ParsedFile

logger = get_logger(__name__)


def _first_with_extension(
    files: list[ParsedFile], extensions: tuple[str, ...]
) -> ParsedFile | None:
    return next((f for f in files if f.path.endswith(extensions)), None)


def select_key_file(files: list[ParsedFile]) -> ParsedFile | None:
    """영상에 보여줄 대표 파일 선택.

    변경 줄 수 내림차순으로 정렬한 뒤 (동률은 diff 순서 유지)
    프론트엔드 확장자 > 일반 소스 확장자 > 가장 많이 바뀐 파일 순으로 고른다.

    Args:
        files: parse_unified_diff 결과

    Returns:
        대표 파일, 목록이 비어 있으면 None
    """
    ranked = sorted(files, key=lambda f: f.changes, reverse=True)

    selected = (
        _first_with_extension(ranked, FRONTEND_EXTENSIONS)
        or _first_with_extension(ranked, SOURCE_EXTENSIONS)
        or (ranked[0] if ranked else None)
    )

    if selected is not None:
        logger.debug("대표 파일 선택 path=%s changes=%d", selected.path, selected.changes)
    return selected


def extract_diff_sample(parsed_file: ParsedFile | None) -> DiffSample:
    """대표 파일의 첫 hunk에서 앞 20줄 발췌.

    Args:
        parsed_file: select_key_file 결과

    Returns:
        파일이 없거나 hunk가 없으면 fileName이 "unknown"인 빈 샘플
    """
    if parsed_file is None or not parsed_file.hunks:
        return DiffSample(file_name=UNKNOWN_FILE_NAME, lines=[])

    first_hunk = parsed_file.hunks[0]
    return DiffSample(
        file_name=parsed_file.path,
        lines=first_hunk.lines[:DIFF_SAMPLE_MAX_LINES],
    )
