"""
Haxe XML 타입 덤프 포맷 마커
태그 이름과 속성 값은 haxe -xml 출력 그대로 인식합니다.
"""

# =============================================================================
# 최상위/클래스 레벨 태그
# =============================================================================
CLASS_TAG = "class"
EXTENDS_TAG = "extends"
IMPLEMENTS_TAG = "implements"

# 건너뛰는 문서/메타 태그
SKIPPED_TAGS = frozenset({"haxe_doc", "meta"})

# =============================================================================
# 멤버 속성
# =============================================================================
STATIC_ATTR = "static"
PUBLIC_ATTR = "public"
TRUE_VALUE = "1"

# set="method" 이면 메소드, 그 외는 필드
MEMBER_KIND_ATTR = "set"
METHOD_KIND_VALUE = "method"

# =============================================================================
# 타입 표현식 태그
# =============================================================================
PATH_ATTR = "path"

FUNCTION_TAG = "f"
FUNCTION_ARGS_ATTR = "a"
FUNCTION_ARGS_SEPARATOR = ":"
OPTIONAL_ARG_PREFIX = "?"

# Null<T> 래퍼가 나타나는 태그 (typedef 참조, abstract 참조)
NULLABLE_WRAPPER_TAGS = frozenset({"t", "x"})

DYNAMIC_TAGS = frozenset({"d", "unknown"})
ANONYMOUS_TAGS = frozenset({"a"})
