"""테스트 공통 fixture"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.analysis.schemas import (
    AIAnalysis,
    AnalysisRecord,
    AnalysisState,
    DiffLine,
    DiffSample,
    FileChange,
    NarrationResult,
    PRMetadata,
    PRReference,
)
from app.main import app

SAMPLE_DIFF = """diff --git a/src/app.py b/src/app.py
index 1111111..2222222 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1,5 @@ def main():
 import os
-import sys
+import sys, json
+import re

 def main():
diff --git a/src/components/Button.tsx b/src/components/Button.tsx
new file mode 100644
index 0000000..3333333
--- /dev/null
+++ b/src/components/Button.tsx
@@ -0,0 +1,3 @@
+export const Button = () => {
+  return <button />
+}
diff --git a/old.txt b/old.txt
deleted file mode 100644
index 4444444..0000000
--- a/old.txt
+++ /dev/null
@@ -1,2 +0,0 @@
-line one
-line two
diff --git a/docs/guide.md b/docs/manual.md
similarity index 90%
rename from docs/guide.md
rename to docs/manual.md
index 5555555..6666666 100644
--- a/docs/guide.md
+++ b/docs/manual.md
@@ -3,2 +3,2 @@
 # Guide
-old text
+new text
"""


def build_auth_diff() -> str:
    """src/a.tsx (+85) 추가, package.json (-15) 수정 diff"""
    added = "\n".join(f"+export const line{i} = {i}" for i in range(85))
    removed = "\n".join(f'-  "dep{i}": "1.0.{i}",' for i in range(15))
    return (
        "diff --git a/src/a.tsx b/src/a.tsx\n"
        "new file mode 100644\n"
        "--- /dev/null\n"
        "+++ b/src/a.tsx\n"
        "@@ -0,0 +1,85 @@\n"
        f"{added}\n"
        "diff --git a/package.json b/package.json\n"
        "--- a/package.json\n"
        "+++ b/package.json\n"
        "@@ -1,16 +1,1 @@\n"
        " {\n"
        f"{removed}\n"
    )


@pytest.fixture
def sample_diff() -> str:
    """수정/추가/삭제/이름변경 파일이 하나씩 있는 diff"""
    return SAMPLE_DIFF


@pytest.fixture
def auth_diff() -> str:
    """프론트엔드 파일 추가 PR diff"""
    return build_auth_diff()


@pytest.fixture
def sample_reference() -> PRReference:
    """테스트용 PR 식별 정보"""
    return PRReference(owner="testuser", repo="testrepo", number=42)


@pytest.fixture
def sample_metadata() -> PRMetadata:
    """테스트용 PR 메타데이터"""
    return PRMetadata(
        number=42,
        title="Add auth",
        body="Adds a login form",
        author="octocat",
    )


@pytest.fixture
def sample_files() -> list[FileChange]:
    """테스트용 파일 변경 목록"""
    return [
        FileChange(path="src/a.tsx", additions=85, deletions=0, status="added"),
        FileChange(path="package.json", additions=0, deletions=15, status="modified"),
    ]


@pytest.fixture
def sample_diff_sample() -> DiffSample:
    """테스트용 diff 발췌"""
    return DiffSample(
        file_name="src/a.tsx",
        lines=[
            DiffLine(kind="addition", content=f"export const line{i} = {i}", line_number=i + 1)
            for i in range(20)
        ],
    )


@pytest.fixture
def sample_narration() -> NarrationResult:
    """테스트용 모델 나레이션 결과"""
    return NarrationResult(
        source="model",
        analysis=AIAnalysis(
            is_frontend=True,
            narration="Adds a login form to the app.",
            key_files=["src/a.tsx"],
        ),
    )


@pytest.fixture
def sample_record(sample_files, sample_diff_sample) -> AnalysisRecord:
    """테스트용 분석 결과"""
    return AnalysisRecord(
        title="Add auth",
        pr_number=42,
        repo_id="testuser/testrepo",
        author="octocat",
        is_frontend=True,
        narration="Adds a login form to the app.",
        key_files=["src/a.tsx"],
        total_additions=85,
        total_deletions=15,
        files=sample_files,
        diff_sample=sample_diff_sample,
    )


@pytest.fixture
def sample_state(sample_reference) -> AnalysisState:
    """워크플로우 시작 상태"""
    return AnalysisState(
        reference=sample_reference,
        github_token="test-token-123",
        session_id="test-session-123",
    )


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def mock_narrator_client():
    """나레이션용 LLM 클라이언트 mock"""
    with patch("app.infra.llm.client.get_narrator_client") as mock_get:
        mock_client = MagicMock()
        mock_client.complete = AsyncMock()
        mock_client.get_model_name.return_value = "test-model"
        mock_get.return_value = mock_client
        yield mock_client


@pytest.fixture
def mock_github_response():
    """GitHub API 응답 mock 생성"""
    mock = MagicMock()
    mock.raise_for_status = MagicMock()
    return mock


@pytest.fixture
def create_http_error():
    """HTTPStatusError 생성 helper"""

    def _create(status_code: int, message: str = "Error"):
        return httpx.HTTPStatusError(
            message,
            request=httpx.Request("GET", "https://test.com"),
            response=httpx.Response(status_code),
        )

    return _create


@pytest.fixture
def mock_workflow():
    """LangGraph 워크플로우 mock"""
    workflow = MagicMock()
    workflow.ainvoke = AsyncMock()
    return workflow
