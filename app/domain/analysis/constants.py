UNKNOWN_FILE_NAME = "unknown"
UNKNOWN_AUTHOR = "unknown"

DIFF_SAMPLE_MAX_LINES = 20
MAX_KEY_FILES = 3

# 대표 파일 선택 우선순위
FRONTEND_EXTENSIONS = (".tsx", ".jsx", ".vue", ".svelte")
SOURCE_EXTENSIONS = (".ts", ".js", ".py", ".go", ".rs")

# 폴백 휴리스틱의 프론트엔드 판단 기준 (스타일 파일 포함)
FRONTEND_STYLE_EXTENSIONS = FRONTEND_EXTENSIONS + (".css", ".scss")

# 데모 경로 추출
DOCS_PAGE_EXTENSION = ".mdx"
ROUTE_SOURCE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
