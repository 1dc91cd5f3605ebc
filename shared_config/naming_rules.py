"""
네이밍 규칙 설정
점(.) 구분 경로 분해, 인자명 정규화 등을 관리합니다.
"""
from typing import List, Optional, Tuple

from .markers import OPTIONAL_ARG_PREFIX

PATH_SEPARATOR = "."

# 이름 없는 인자에 붙이는 이름 형식
UNNAMED_ARG_FORMAT = "__{index}"


# =============================================================================
# 헬퍼 함수
# =============================================================================

def split_path(path: str) -> Tuple[List[str], str]:
    """
    전체 경로를 (네임스페이스 세그먼트 목록, 마지막 이름)으로 분리

    Examples:
        nape.geom.Vec2 -> (["nape", "geom"], "Vec2")
        Std -> ([], "Std")
    """
    segments = path.split(PATH_SEPARATOR)
    return segments[:-1], segments[-1]


def short_name(path: Optional[str]) -> Optional[str]:
    """경로의 마지막 세그먼트 (None이면 None)"""
    if not path:
        return path
    return path.rsplit(PATH_SEPARATOR, 1)[-1]


def parse_arg_name(raw_name: str) -> Tuple[str, bool]:
    """
    함수 인자명에서 선택 인자 접두사(?)를 분리

    Examples:
        ?radius -> ("radius", True)
        x -> ("x", False)
    """
    if raw_name.startswith(OPTIONAL_ARG_PREFIX):
        return raw_name[len(OPTIONAL_ARG_PREFIX):], True
    return raw_name, False


def display_arg_name(name: str, index: int) -> str:
    """출력용 인자명 (비어 있으면 __<index>)"""
    return name or UNNAMED_ARG_FORMAT.format(index=index)
