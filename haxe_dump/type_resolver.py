"""
타입 표현식 해석기
Haxe XML 타입 표현식 노드를 정규화된 TypeValue로 변환합니다.
"""
import os
import sys
from typing import Iterable, List, Optional
from xml.etree.ElementTree import Element

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shared_config import MalformedTypeNode, parse_arg_name
from shared_config.markers import (
    ANONYMOUS_TAGS,
    CLASS_TAG,
    DYNAMIC_TAGS,
    FUNCTION_ARGS_ATTR,
    FUNCTION_ARGS_SEPARATOR,
    FUNCTION_TAG,
    NULLABLE_WRAPPER_TAGS,
    PATH_ATTR,
)
from shared_config.logger import logger
from .types import (
    AnonymousType,
    Argument,
    ClassRefType,
    DynamicType,
    FunctionType,
    NormalType,
    TypeValue,
)


class TypeResolver:
    """
    타입 표현식 노드를 TypeValue로 변환하는 클래스

    처리 순서:
    1. Null<T> 래퍼 제거 (TypeScript는 모든 타입이 nullable)
    2. 배열 래퍼 한 단계 제거 (T[]로 표시)
    3. 함수 표현식(<f a="x:?y">) → FunctionType
    4. 익명 타입(<a>) → AnonymousType
    5. 그 외 → DynamicType / ClassRefType / NormalType

    사용 예:
        resolver = TypeResolver()
        type_value = resolver.resolve(ET.fromstring('<x path="Int"/>'))
    """

    def __init__(
        self,
        nullable_wrapper_path: str = "Null",
        array_wrapper_paths: Iterable[str] = ("Array", "nape.TArray")
    ):
        """
        Args:
            nullable_wrapper_path: Null 래퍼 경로
            array_wrapper_paths: 배열 래퍼로 취급할 경로들
        """
        self.nullable_wrapper_path = nullable_wrapper_path
        self.array_wrapper_paths = frozenset(array_wrapper_paths)

    def resolve(self, node: Element) -> TypeValue:
        """
        타입 표현식 노드 하나를 TypeValue로 변환

        Raises:
            MalformedTypeNode: 필수 속성/자식이 없는 경우
        """
        node = self._strip_nullable(node)

        is_array = False
        if node.get(PATH_ATTR) in self.array_wrapper_paths:
            is_array = True
            node = self._strip_nullable(self._first_child(node))

        tag = node.tag

        if tag == FUNCTION_TAG:
            if is_array:
                raise MalformedTypeNode("함수 타입은 배열 래퍼로 감쌀 수 없습니다", tag)
            return self._resolve_function(node)

        if tag in ANONYMOUS_TAGS:
            return AnonymousType()

        if tag in DYNAMIC_TAGS:
            return DynamicType(is_array=is_array)

        path = self._require_path(node)
        if tag == CLASS_TAG:
            return ClassRefType(path=path, is_array=is_array)
        return NormalType(path=path, is_array=is_array)

    def _resolve_function(self, node: Element) -> FunctionType:
        """함수 표현식 변환 (마지막 자식이 반환 타입)"""
        raw_names = node.get(FUNCTION_ARGS_ATTR)
        if raw_names is None:
            raise MalformedTypeNode(f"'{FUNCTION_ARGS_ATTR}' 속성이 없습니다", node.tag)

        children = list(node)
        if not children:
            raise MalformedTypeNode("반환 타입 자식이 없습니다", node.tag)

        names = raw_names.split(FUNCTION_ARGS_SEPARATOR) if raw_names else []
        arg_nodes = children[:-1]
        if len(names) < len(arg_nodes):
            logger.debug(f"인자명 부족: {len(names)}개 이름, {len(arg_nodes)}개 인자")

        parsed = []
        for i, arg_node in enumerate(arg_nodes):
            raw_name = names[i] if i < len(names) else ""
            name, optional = parse_arg_name(raw_name)
            parsed.append((name, self.resolve(arg_node), optional))

        args = [
            Argument(name=name, type=arg_type, optional=optional)
            for name, arg_type, optional in repair_optional_order(parsed)
        ]
        return FunctionType(args=tuple(args), return_type=self.resolve(children[-1]))

    def _strip_nullable(self, node: Element) -> Element:
        while node.tag in NULLABLE_WRAPPER_TAGS and node.get(PATH_ATTR) == self.nullable_wrapper_path:
            node = self._first_child(node)
        return node

    def _first_child(self, node: Element) -> Element:
        children = list(node)
        if not children:
            raise MalformedTypeNode(
                f"래퍼 타입 '{node.get(PATH_ATTR)}'에 내부 타입이 없습니다", node.tag
            )
        return children[0]

    def _require_path(self, node: Element) -> str:
        path = node.get(PATH_ATTR)
        if not path:
            raise MalformedTypeNode(f"'{PATH_ATTR}' 속성이 없습니다", node.tag)
        return path


def repair_optional_order(args: List[tuple]) -> List[tuple]:
    """
    필수 인자 앞의 선택 인자를 필수로 바꿈

    마지막 필수 인자 인덱스 k 이하의 모든 인자는 optional=False.
    TypeScript는 필수 인자 앞에 선택 인자를 둘 수 없습니다.

    Args:
        args: [(name, type, optional), ...]

    Returns:
        보정된 [(name, type, optional), ...]

    Examples:
        a:?b:c:?d -> [False, False, False, True]
    """
    last_required: Optional[int] = None
    for i, (_, _, optional) in enumerate(args):
        if not optional:
            last_required = i

    if last_required is None:
        return list(args)

    return [
        (name, arg_type, optional and i > last_required)
        for i, (name, arg_type, optional) in enumerate(args)
    ]
