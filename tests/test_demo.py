"""데모 경로 추출 테스트"""

import pytest

from app.domain.analysis.demo import build_demo_url, suggest_demo_routes
from app.domain.analysis.schemas import FileChange


def _added(path: str) -> FileChange:
    return FileChange(path=path, additions=10, deletions=0, status="added")


class TestSuggestDemoRoutes:
    """suggest_demo_routes 함수 테스트"""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("content/docs/getting-started.mdx", "/docs/getting-started"),
            ("content/docs/api/index.mdx", "/docs/api"),
            ("src/pages/about.tsx", "/about"),
            ("src/pages/blog/index.tsx", "/blog"),
            ("pages/contact.jsx", "/contact"),
            ("src/app/dashboard/page.tsx", "/dashboard"),
            ("app/settings/page.js", "/settings"),
            ("src/pages/index.tsx", "/"),
        ],
    )
    def test_routes(self, path, expected):
        """문서와 페이지 파일에서 경로 추출"""
        assert suggest_demo_routes([_added(path)]) == [expected]

    @pytest.mark.parametrize(
        "path",
        [
            "src/pages/_app.tsx",
            "src/pages/api/users.ts",
            "src/components/Button.tsx",
            "content/docs/guide.md",
            "src/app/dashboard/styles.css",
        ],
    )
    def test_ignored_files(self, path):
        """내부 파일, API, 페이지가 아닌 파일은 제외"""
        assert suggest_demo_routes([_added(path)]) == []

    def test_only_added_files(self):
        """새로 추가된 파일만 대상"""
        files = [
            FileChange(path="src/pages/old.tsx", additions=1, deletions=1, status="modified"),
            _added("src/pages/new.tsx"),
        ]

        assert suggest_demo_routes(files) == ["/new"]

    def test_keeps_diff_order(self):
        """diff 순서 유지"""
        files = [_added("src/pages/b.tsx"), _added("content/docs/a.mdx")]

        assert suggest_demo_routes(files) == ["/b", "/docs/a"]


class TestBuildDemoUrl:
    """build_demo_url 함수 테스트"""

    def test_no_routes(self):
        """경로가 없으면 기본 URL"""
        assert build_demo_url("http://localhost:3000", []) == "http://localhost:3000"

    def test_prefers_overview(self):
        """overview 경로 우선"""
        routes = ["/docs/intro", "/docs/overview"]

        assert build_demo_url("http://localhost:3000/", routes) == "http://localhost:3000/docs/overview"

    def test_skips_meta(self):
        """meta 경로는 후순위"""
        routes = ["/docs/meta", "/docs/intro"]

        assert build_demo_url("http://localhost:3000", routes) == "http://localhost:3000/docs/intro"

    def test_only_meta(self):
        """meta 경로뿐이면 첫 경로"""
        assert build_demo_url("http://x", ["/meta"]) == "http://x/meta"
