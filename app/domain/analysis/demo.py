"""새로 추가된 페이지에서 데모 녹화용 URL 경로 추출"""

import re

from app.domain.analysis.constants import DOCS_PAGE_EXTENSION, ROUTE_SOURCE_EXTENSIONS
from app.domain.analysis.schemas import FileChange

ROUTER_DIR_PATTERN = re.compile(r"(?:^|/)(pages|app)/")
ROUTER_PREFIX_PATTERN = re.compile(r"^(pages|app)")
ROUTE_SUFFIXES = ("/index", "/page")


def _strip_suffix(route: str, suffixes: tuple[str, ...]) -> str:
    for suffix in suffixes:
        if route.endswith(suffix):
            return route[: -len(suffix)]
    return route


def _docs_route(path: str) -> str | None:
    route = path.removeprefix("content").removesuffix(DOCS_PAGE_EXTENSION)
    if "meta.json" in route:
        return None
    return _strip_suffix(route, ("/index",))


def _router_route(path: str) -> str | None:
    route = ROUTER_PREFIX_PATTERN.sub("", path.removeprefix("src/"), count=1)
    for extension in ROUTE_SOURCE_EXTENSIONS:
        route = route.removesuffix(extension)
    route = _strip_suffix(route, ROUTE_SUFFIXES)
    if route.startswith("/_") or "/api/" in route:
        return None
    return route


def suggest_demo_routes(files: list[FileChange]) -> list[str]:
    """추가된 문서/페이지 파일에서 데모 경로 목록 생성

    Args:
        files: 분석 결과의 파일 목록

    Returns:
        diff 순서를 유지한 경로 목록 (예: "/docs/intro", "/dashboard")
    """
    routes = []
    for f in files:
        if f.status != "added":
            continue

        route = None
        if "/docs/" in f.path and f.path.endswith(DOCS_PAGE_EXTENSION):
            route = _docs_route(f.path)
        elif ROUTER_DIR_PATTERN.search(f.path) and f.path.endswith(ROUTE_SOURCE_EXTENSIONS):
            route = _router_route(f.path)

        if route is not None:
            routes.append(route or "/")
    return routes


def build_demo_url(base_url: str, routes: list[str]) -> str:
    """대표 경로를 골라 데모 URL 생성, overview 경로 우선"""
    if not routes:
        return base_url

    primary = (
        next((r for r in routes if "overview" in r), None)
        or next((r for r in routes if "meta" not in r), None)
        or routes[0]
    )
    return f"{base_url.rstrip('/')}{primary}"
