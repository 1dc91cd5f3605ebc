"""
haxe_dump 모듈
Haxe XML 타입 덤프를 파싱하여 클래스/타입 모델을 구성합니다.
"""

from .types import (
    TypeKind,
    MemberKind,
    DynamicType,
    FunctionType,
    AnonymousType,
    ClassRefType,
    NormalType,
    TypeValue,
    Argument,
    Method,
    Field,
    ClassDef,
)
from .type_resolver import TypeResolver, repair_optional_order
from .class_extractor import ClassExtractor, classify_member, is_class_node
from .registry import TypeRegistry, build_registry
from .dump_reader import parse_dump, read_dump

__all__ = [
    # 타입 모델
    "TypeKind",
    "MemberKind",
    "DynamicType",
    "FunctionType",
    "AnonymousType",
    "ClassRefType",
    "NormalType",
    "TypeValue",
    "Argument",
    "Method",
    "Field",
    "ClassDef",
    # 해석/추출
    "TypeResolver",
    "repair_optional_order",
    "ClassExtractor",
    "classify_member",
    "is_class_node",
    # 레지스트리
    "TypeRegistry",
    "build_registry",
    # 입력
    "parse_dump",
    "read_dump",
]
