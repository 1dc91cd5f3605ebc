"""
dts_generator 모듈
타입 레지스트리를 네임스페이스 트리로 접고 TypeScript 선언 파일로 출력합니다.
"""

from .namespace_tree import NamespaceNode, build_tree, insert_def
from .type_printer import TypeRefPrinter
from .generator import DTSGenerator, INDENT_UNIT

__all__ = [
    "NamespaceNode",
    "build_tree",
    "insert_def",
    "TypeRefPrinter",
    "DTSGenerator",
    "INDENT_UNIT",
]
