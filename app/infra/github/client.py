import re

import httpx

from app.core.config import settings
from app.core.exceptions import InvalidReferenceError
from app.core.logging import get_logger
from app.domain.analysis.schemas import PRMetadata, PRReference

logger = get_logger(__name__)

GITHUB_HOST = "github.com"
GITHUB_API_BASE = "https://api.github.com"

PR_URL_PATTERN = re.compile(
    r"^https?://([A-Za-z0-9.-]+(?::\d+)?)/([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)/pull/(\d+)(?:[/?#].*)?$"
)

DIFF_MEDIA_TYPE = "application/vnd.github.v3.diff"
JSON_MEDIA_TYPE = "application/vnd.github.v3+json"

_client = httpx.AsyncClient(timeout=settings.github_timeout)


def _get_headers(token: str | None = None, accept: str = JSON_MEDIA_TYPE) -> dict[str, str]:
    """GitHub API 요청 헤더 생성

    Args:
        token: GitHub 토큰, 없으면 설정값 사용
        accept: 응답 미디어 타입

    Returns:
        HTTP 헤더 딕셔너리
    """
    headers = {"Accept": accept}
    token = token or settings.github_token
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def _api_base(host: str) -> str:
    """호스트별 REST API 주소, github.com 외에는 GitHub Enterprise로 간주"""
    if host.lower() in (GITHUB_HOST, f"www.{GITHUB_HOST}"):
        return GITHUB_API_BASE
    return f"https://{host}/api/v3"


async def close_client():
    """httpx 클라이언트 종료"""
    await _client.aclose()


def parse_pr_url(pr_url: str) -> PRReference:
    """PR URL에서 host, owner, repo, number 추출

    Args:
        pr_url: https://<host>/<owner>/<repo>/pull/<number> 형식 URL

    Returns:
        PR 식별 정보

    Raises:
        InvalidReferenceError: 형식이 맞지 않는 경우
    """
    match = PR_URL_PATTERN.match(pr_url.strip())
    if not match:
        raise InvalidReferenceError(f"유효하지 않은 PR URL: {pr_url}")

    host, owner, repo, number = match.groups()
    return PRReference(
        host=host,
        owner=owner,
        repo=repo.removesuffix(".git"),
        number=int(number),
    )


async def get_pull(reference: PRReference, token: str | None = None) -> PRMetadata:
    """PR 메타데이터 조회

    Args:
        reference: PR 식별 정보
        token: GitHub 토큰

    Returns:
        PR 제목, 본문, 작성자

    Raises:
        httpx.HTTPStatusError: GitHub API 호출 실패 시
    """
    url = f"{_api_base(reference.host)}/repos/{reference.repo_id}/pulls/{reference.number}"

    response = await _client.get(url, headers=_get_headers(token))
    response.raise_for_status()
    data = response.json()

    logger.info("PR 조회 완료 pr=%s", reference)
    return PRMetadata(
        number=data["number"],
        title=data["title"],
        body=data.get("body"),
        author=(data.get("user") or {}).get("login"),
    )


async def get_pull_diff(reference: PRReference, token: str | None = None) -> str:
    """PR unified diff 원문 조회

    Args:
        reference: PR 식별 정보
        token: GitHub 토큰

    Returns:
        diff 텍스트

    Raises:
        httpx.HTTPStatusError: GitHub API 호출 실패 시
    """
    url = f"{_api_base(reference.host)}/repos/{reference.repo_id}/pulls/{reference.number}"

    response = await _client.get(url, headers=_get_headers(token, accept=DIFF_MEDIA_TYPE))
    response.raise_for_status()

    logger.info("PR diff 조회 완료 pr=%s bytes=%d", reference, len(response.content))
    return response.text
