"""
변환 오류 정의
치명적 오류는 예외로 전파하고, 비치명적 조건은 Diagnostic으로 수집합니다.
"""
from dataclasses import dataclass
from typing import Optional


class TranslationError(Exception):
    """변환 파이프라인 오류 베이스"""


class MalformedTypeNode(TranslationError):
    """필수 속성/자식이 없는 타입 표현식 또는 선언 노드"""

    def __init__(self, message: str, tag: Optional[str] = None):
        self.tag = tag
        if tag:
            message = f"<{tag}> {message}"
        super().__init__(message)


class UnsupportedTypeKind(TranslationError):
    """출력할 수 없는 타입(익명 타입, 인라인 클래스 참조)이 emitter에 도달"""

    def __init__(self, kind, context: str = ""):
        self.kind = kind
        self.context = context
        name = getattr(kind, "name", str(kind))
        message = f"타입 종류 {name}는 선언으로 출력할 수 없습니다"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class UnrecognizedTopLevelNode(TranslationError):
    """클래스 정의가 아닌 최상위 노드 (건너뛰고 계속 진행)"""

    def __init__(self, tag: str, path: Optional[str] = None):
        self.tag = tag
        self.path = path
        super().__init__(f"클래스가 아닌 최상위 요소: <{tag}> path={path}")


class DuplicateTypePath(TranslationError):
    """같은 전체 경로로 두 번 등록된 정의 (duplicate_policy=reject)"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"중복된 타입 경로: {path}")


class ConfigError(TranslationError):
    """잘못된 설정 파일/값"""


@dataclass
class Diagnostic:
    """비치명적 진단 정보"""
    code: str                      # 예: "unrecognized_top_level"
    message: str
    path: Optional[str] = None     # 관련 타입 경로

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "path": self.path}
