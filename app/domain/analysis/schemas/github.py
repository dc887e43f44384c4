from app.domain.analysis.schemas.base import FrozenModel


class PRReference(FrozenModel):
    """PR URL에서 추출한 식별 정보"""

    host: str = "github.com"
    owner: str
    repo: str
    number: int

    @property
    def repo_id(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}#{self.number}"


class PRMetadata(FrozenModel):
    """PR 메타데이터"""

    number: int
    title: str
    body: str | None = None
    author: str | None = None
