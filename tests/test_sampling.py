"""대표 파일 선택 및 diff 발췌 테스트"""

import pytest

from app.domain.analysis.diff_parser import parse_unified_diff
from app.domain.analysis.sampling import extract_diff_sample, select_key_file
from app.domain.analysis.schemas import DiffHunk, DiffLine, ParsedFile


def _parsed(path: str, additions: int, deletions: int = 0) -> ParsedFile:
    return ParsedFile(old_path=path, new_path=path, additions=additions, deletions=deletions)


class TestSelectKeyFile:
    """select_key_file 함수 테스트"""

    def test_empty_list(self):
        """빈 목록이면 None"""
        assert select_key_file([]) is None

    def test_frontend_outranks_larger_source(self):
        """프론트엔드 확장자가 더 많이 바뀐 일반 소스보다 우선"""
        files = [_parsed("server/main.py", 300), _parsed("web/App.vue", 5)]

        assert select_key_file(files).path == "web/App.vue"

    def test_source_outranks_larger_other(self):
        """일반 소스 확장자가 기타 파일보다 우선"""
        files = [_parsed("package-lock.json", 900), _parsed("lib/util.go", 2)]

        assert select_key_file(files).path == "lib/util.go"

    def test_largest_change_among_same_priority(self):
        """같은 우선순위에서는 변경 줄 수가 가장 많은 파일"""
        files = [_parsed("a.tsx", 10), _parsed("b.jsx", 30, 5), _parsed("c.svelte", 20)]

        assert select_key_file(files).path == "b.jsx"

    def test_ties_keep_diff_order(self):
        """변경 줄 수가 같으면 diff 순서 유지"""
        files = [_parsed("first.ts", 4), _parsed("second.ts", 2, 2)]

        assert select_key_file(files).path == "first.ts"

    def test_falls_back_to_most_changed(self):
        """우선순위 확장자가 없으면 가장 많이 바뀐 파일"""
        files = [_parsed("README.md", 3), _parsed("config.yaml", 7)]

        assert select_key_file(files).path == "config.yaml"

    @pytest.mark.parametrize(
        "path",
        ["src/Widget.tsx", "src/Widget.jsx", "src/Widget.vue", "src/Widget.svelte"],
    )
    def test_frontend_extensions(self, path):
        """프론트엔드 확장자 목록"""
        files = [_parsed("server.py", 100), _parsed(path, 1)]

        assert select_key_file(files).path == path

    def test_auth_example(self, auth_diff):
        """a.tsx(+85)와 package.json(-15) 중 a.tsx 선택"""
        selected = select_key_file(parse_unified_diff(auth_diff))

        assert selected.path == "src/a.tsx"


class TestExtractDiffSample:
    """extract_diff_sample 함수 테스트"""

    def test_none_file(self):
        """선택된 파일이 없으면 unknown 빈 샘플"""
        sample = extract_diff_sample(None)

        assert sample.file_name == "unknown"
        assert sample.lines == []

    def test_file_without_hunks(self):
        """hunk가 없는 파일은 unknown 빈 샘플"""
        sample = extract_diff_sample(_parsed("logo.png", 0))

        assert sample.file_name == "unknown"
        assert sample.lines == []

    def test_first_hunk_only(self):
        """첫 hunk만 발췌"""
        first = DiffHunk(
            old_start=1,
            old_lines=0,
            new_start=1,
            new_lines=1,
            lines=[DiffLine(kind="addition", content="first", line_number=1)],
        )
        second = DiffHunk(
            old_start=10,
            old_lines=0,
            new_start=11,
            new_lines=1,
            lines=[DiffLine(kind="addition", content="second", line_number=11)],
        )
        parsed = ParsedFile(new_path="a.ts", hunks=[first, second], additions=2)

        sample = extract_diff_sample(parsed)

        assert sample.file_name == "a.ts"
        assert [line.content for line in sample.lines] == ["first"]

    def test_truncates_to_twenty_lines(self, auth_diff):
        """첫 hunk의 앞 20줄로 제한"""
        key_file = select_key_file(parse_unified_diff(auth_diff))

        sample = extract_diff_sample(key_file)

        assert sample.file_name == "src/a.tsx"
        assert len(sample.lines) == 20
        assert sample.lines[0].content == "export const line0 = 0"
        assert sample.lines[-1].line_number == 20
