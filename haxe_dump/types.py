"""
Haxe 타입 모델 정의 모듈

TypeValue(닫힌 태그 유니온 5종), 인자/메소드/필드, ClassDef 데이터 클래스를 정의합니다.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple, Union

from shared_config.naming_rules import short_name


class TypeKind(Enum):
    """TypeValue 종류"""
    DYNAMIC = "dynamic"
    FUNCTION = "function"
    ANONYMOUS = "anonymous"
    CLASS = "class"
    NORMAL = "normal"


class MemberKind(Enum):
    """클래스 멤버 종류 (추출 시점에 한 번 결정)"""
    METHOD = "method"
    FIELD = "field"


@dataclass(frozen=True)
class DynamicType:
    """Dynamic (any)"""
    is_array: bool = False
    kind: ClassVar[TypeKind] = TypeKind.DYNAMIC


@dataclass(frozen=True)
class Argument:
    """함수 인자"""
    name: str                          # 빈 문자열이면 출력 시 __<index>
    type: "TypeValue"
    optional: bool = False


@dataclass(frozen=True)
class FunctionType:
    """함수 시그니처"""
    args: Tuple[Argument, ...]
    return_type: "TypeValue"
    kind: ClassVar[TypeKind] = TypeKind.FUNCTION


@dataclass(frozen=True)
class AnonymousType:
    """익명 구조 타입 (멤버 미지원 플레이스홀더)"""
    kind: ClassVar[TypeKind] = TypeKind.ANONYMOUS


@dataclass(frozen=True)
class ClassRefType:
    """타입 위치에 인라인으로 나온 클래스 참조"""
    path: str
    is_array: bool = False
    kind: ClassVar[TypeKind] = TypeKind.CLASS

    @property
    def name(self) -> str:
        return short_name(self.path)


@dataclass(frozen=True)
class NormalType:
    """기본 타입/별칭/일반 경로 참조"""
    path: str
    is_array: bool = False
    kind: ClassVar[TypeKind] = TypeKind.NORMAL

    @property
    def name(self) -> str:
        return short_name(self.path)


TypeValue = Union[DynamicType, FunctionType, AnonymousType, ClassRefType, NormalType]


@dataclass
class Method:
    """클래스 메소드"""
    name: str
    is_public: bool
    signature: FunctionType


@dataclass
class Field:
    """클래스 필드"""
    name: str
    is_public: bool
    type: TypeValue


@dataclass
class ClassDef:
    """클래스 정의"""
    path: str                                      # 전체 경로 (예: nape.geom.Vec2)
    parent_path: Optional[str] = None              # extends 대상 (이름만, 해석 안 함)
    interfaces: List[str] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)
    static_methods: List[Method] = field(default_factory=list)
    fields: List[Field] = field(default_factory=list)
    static_fields: List[Field] = field(default_factory=list)
    kind: ClassVar[TypeKind] = TypeKind.CLASS

    @property
    def name(self) -> str:
        return short_name(self.path)

    @property
    def parent_name(self) -> Optional[str]:
        return short_name(self.parent_path)

    def add_method(self, method: Method, is_static: bool) -> None:
        (self.static_methods if is_static else self.methods).append(method)

    def add_field(self, member: Field, is_static: bool) -> None:
        (self.static_fields if is_static else self.fields).append(member)

    @property
    def member_count(self) -> int:
        return (len(self.methods) + len(self.static_methods)
                + len(self.fields) + len(self.static_fields))
