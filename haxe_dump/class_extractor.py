"""
클래스/멤버 추출기
<class> 정의 노드 하나를 ClassDef로 변환합니다.
"""
import os
import sys
from typing import Optional
from xml.etree.ElementTree import Element

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shared_config import MalformedTypeNode, UnrecognizedTopLevelNode
from shared_config.markers import (
    CLASS_TAG,
    EXTENDS_TAG,
    FUNCTION_TAG,
    IMPLEMENTS_TAG,
    MEMBER_KIND_ATTR,
    METHOD_KIND_VALUE,
    PATH_ATTR,
    PUBLIC_ATTR,
    SKIPPED_TAGS,
    STATIC_ATTR,
    TRUE_VALUE,
)
from shared_config.logger import logger
from .type_resolver import TypeResolver
from .types import ClassDef, Field, MemberKind, Method


def is_class_node(node: Element) -> bool:
    """클래스 정의 노드인지 확인"""
    return node.tag == CLASS_TAG


def classify_member(member: Element) -> MemberKind:
    """멤버 노드의 종류 결정 (set="method" 이면 메소드)"""
    if member.get(MEMBER_KIND_ATTR) == METHOD_KIND_VALUE:
        return MemberKind.METHOD
    return MemberKind.FIELD


def _flag(member: Element, attr: str) -> bool:
    return member.get(attr) == TRUE_VALUE


class ClassExtractor:
    """
    클래스 정의 노드를 ClassDef로 변환하는 클래스

    자식 노드 분류:
    - <extends path="..."/>: 부모 클래스 경로
    - <implements path="..."/>: 인터페이스 경로
    - <haxe_doc>, <meta>: 무시
    - 그 외: 멤버 선언 (태그 이름 = 멤버 이름)

    사용 예:
        extractor = ClassExtractor(TypeResolver())
        class_def = extractor.extract(class_node)
    """

    def __init__(self, resolver: Optional[TypeResolver] = None):
        self.resolver = resolver or TypeResolver()

    def extract(self, class_node: Element) -> ClassDef:
        """
        클래스 정의 노드 하나를 ClassDef로 변환

        Raises:
            UnrecognizedTopLevelNode: 클래스 정의가 아닌 노드
            MalformedTypeNode: path 누락 또는 잘못된 멤버 타입
        """
        if not is_class_node(class_node):
            raise UnrecognizedTopLevelNode(class_node.tag, class_node.get(PATH_ATTR))

        path = class_node.get(PATH_ATTR)
        if not path:
            raise MalformedTypeNode(f"'{PATH_ATTR}' 속성이 없습니다", class_node.tag)

        class_def = ClassDef(path=path)

        for child in class_node:
            if child.tag == EXTENDS_TAG:
                class_def.parent_path = self._require_path(child)
            elif child.tag == IMPLEMENTS_TAG:
                class_def.interfaces.append(self._require_path(child))
            elif child.tag in SKIPPED_TAGS:
                continue
            else:
                self._extract_member(class_def, child)

        logger.debug(
            f"클래스 추출: {path} (필드 {len(class_def.fields)}+{len(class_def.static_fields)}, "
            f"메소드 {len(class_def.methods)}+{len(class_def.static_methods)})"
        )
        return class_def

    def _extract_member(self, class_def: ClassDef, member: Element) -> None:
        """멤버 하나를 메소드/필드로 분류하여 추가"""
        is_static = _flag(member, STATIC_ATTR)
        is_public = _flag(member, PUBLIC_ATTR)

        if classify_member(member) is MemberKind.METHOD:
            function_node = member.find(FUNCTION_TAG)
            if function_node is None:
                raise MalformedTypeNode(
                    f"메소드 '{member.tag}'에 함수 표현식이 없습니다 ({class_def.path})",
                    member.tag,
                )
            method = Method(
                name=member.tag,
                is_public=is_public,
                signature=self.resolver.resolve(function_node),
            )
            class_def.add_method(method, is_static)
        else:
            type_node = self._field_type_node(member)
            if type_node is None:
                raise MalformedTypeNode(
                    f"필드 '{member.tag}'에 타입이 없습니다 ({class_def.path})",
                    member.tag,
                )
            class_def.add_field(
                Field(name=member.tag, is_public=is_public, type=self.resolver.resolve(type_node)),
                is_static,
            )

    def _field_type_node(self, member: Element) -> Optional[Element]:
        """필드의 타입 노드 (문서/메타 태그 제외한 첫 자식)"""
        for child in member:
            if child.tag not in SKIPPED_TAGS:
                return child
        return None

    def _require_path(self, node: Element) -> str:
        path = node.get(PATH_ATTR)
        if not path:
            raise MalformedTypeNode(f"'{PATH_ATTR}' 속성이 없습니다", node.tag)
        return path
