"""분석 서비스 테스트"""

from unittest.mock import patch

import pytest

from app.core.exceptions import (
    CustomException,
    ErrorCode,
    GitHubAPIError,
    InvalidReferenceError,
    MalformedDiffError,
)
from app.domain.analysis.service import analyze_pull_request

PR_URL = "https://github.com/testuser/testrepo/pull/42"


class TestAnalyzePullRequest:
    """analyze_pull_request 함수 테스트"""

    @pytest.mark.asyncio
    async def test_returns_record(self, mock_workflow, sample_record):
        """워크플로우 결과의 분석 결과 반환"""
        mock_workflow.ainvoke.return_value = {"record": sample_record}

        with patch(
            "app.domain.analysis.service.get_analysis_workflow",
            return_value=mock_workflow,
        ):
            result = await analyze_pull_request(PR_URL, "token", session_id="s-1")

        assert result == sample_record
        state = mock_workflow.ainvoke.call_args.args[0]
        assert state["reference"].repo_id == "testuser/testrepo"
        assert state["reference"].number == 42
        assert state["github_token"] == "token"
        assert state["session_id"] == "s-1"

    @pytest.mark.asyncio
    async def test_invalid_url(self, mock_workflow):
        """잘못된 URL은 워크플로우 실행 전에 실패"""
        with patch(
            "app.domain.analysis.service.get_analysis_workflow",
            return_value=mock_workflow,
        ):
            with pytest.raises(InvalidReferenceError):
                await analyze_pull_request("https://github.com/testuser/testrepo")

        mock_workflow.ainvoke.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error_code,expected_error",
        [
            (ErrorCode.GITHUB_API_ERROR, GitHubAPIError),
            (ErrorCode.MALFORMED_DIFF, MalformedDiffError),
        ],
    )
    async def test_workflow_errors(self, mock_workflow, error_code, expected_error):
        """상태에 남은 에러 코드를 대응하는 예외로 변환"""
        mock_workflow.ainvoke.return_value = {
            "error_code": error_code,
            "error_message": "상세 메시지",
        }

        with patch(
            "app.domain.analysis.service.get_analysis_workflow",
            return_value=mock_workflow,
        ):
            with pytest.raises(expected_error) as exc_info:
                await analyze_pull_request(PR_URL)

        assert exc_info.value.detail == "상세 메시지"

    @pytest.mark.asyncio
    async def test_unknown_error_code(self, mock_workflow):
        """알 수 없는 에러 코드는 500 에러"""
        mock_workflow.ainvoke.return_value = {
            "error_code": "SOMETHING_ELSE",
            "error_message": "unexpected",
        }

        with patch(
            "app.domain.analysis.service.get_analysis_workflow",
            return_value=mock_workflow,
        ):
            with pytest.raises(CustomException) as exc_info:
                await analyze_pull_request(PR_URL)

        assert exc_info.value.status_code == 500
        assert exc_info.value.error_code == ErrorCode.INTERNAL_ERROR
