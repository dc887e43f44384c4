from app.core.logging import get_logger
from app.domain.analysis.constants import MAX_KEY_FILES, UNKNOWN_AUTHOR
from app.domain.analysis.schemas import (
    AnalysisRecord,
    DiffSample,
    FileChange,
    NarrationResult,
    PRMetadata,
    PRReference,
)

logger = get_logger(__name__)


def assemble_analysis(
    reference: PRReference,
    metadata: PRMetadata,
    files: list[FileChange],
    diff_sample: DiffSample,
    narration: NarrationResult,
) -> AnalysisRecord:
    """PR 메타데이터, 파일 통계, diff 샘플, 나레이션을 하나의 분석 결과로 병합.

    합계 통계는 샘플로 고른 파일과 무관하게 전체 파일을 더한 값이다.

    Args:
        reference: PR 식별 정보
        metadata: PR 제목/본문/작성자
        files: 전체 파일 변경 목록
        diff_sample: 대표 파일 diff 발췌
        narration: synthesize_narrative 결과

    Returns:
        불변 분석 결과
    """
    record = AnalysisRecord(
        title=metadata.title,
        pr_number=metadata.number,
        repo_id=reference.repo_id,
        author=metadata.author or UNKNOWN_AUTHOR,
        is_frontend=narration.analysis.is_frontend,
        narration=narration.analysis.narration,
        key_files=narration.analysis.key_files[:MAX_KEY_FILES],
        total_additions=sum(f.additions for f in files),
        total_deletions=sum(f.deletions for f in files),
        files=files,
        diff_sample=diff_sample,
    )

    logger.info(
        "분석 결과 생성 files=%d additions=%d deletions=%d narration_source=%s",
        len(files),
        record.total_additions,
        record.total_deletions,
        narration.source,
    )
    return record
