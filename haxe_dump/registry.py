"""
타입 레지스트리 모듈

전체 경로 → ClassDef 평면 매핑을 관리합니다.
추출 단계에서 한 번 채워지고, 이후에는 읽기 전용입니다.
"""

from typing import Dict, Iterator, List, Optional, Tuple
from xml.etree.ElementTree import Element

from shared_config import (
    Diagnostic,
    DuplicateTypePath,
    UnrecognizedTopLevelNode,
)
from shared_config.logger import logger
from .class_extractor import ClassExtractor
from .types import ClassDef


class TypeRegistry:
    """타입 레지스트리

    Example:
        registry = TypeRegistry(duplicate_policy="reject")
        registry.register(class_def)
        registry.freeze()

        for path, class_def in registry.items():
            ...
    """

    def __init__(self, duplicate_policy: str = "overwrite"):
        self._types: Dict[str, ClassDef] = {}
        self._frozen = False
        self.duplicate_policy = duplicate_policy

    def register(self, class_def: ClassDef) -> bool:
        """정의 등록

        같은 경로가 이미 있으면 duplicate_policy에 따라
        덮어쓰거나(overwrite) DuplicateTypePath를 발생시킵니다(reject).

        Returns:
            기존 정의를 덮어썼으면 True
        """
        if self._frozen:
            raise RuntimeError("고정된 레지스트리에는 등록할 수 없습니다")

        replaced = class_def.path in self._types
        if replaced:
            if self.duplicate_policy == "reject":
                raise DuplicateTypePath(class_def.path)
            logger.warning(f"중복 경로, 나중 정의로 덮어씀: {class_def.path}")

        self._types[class_def.path] = class_def
        return replaced

    def freeze(self) -> None:
        """이후 등록 금지"""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, path: str) -> Optional[ClassDef]:
        return self._types.get(path)

    def items(self) -> Iterator[Tuple[str, ClassDef]]:
        return iter(list(self._types.items()))

    def paths(self) -> List[str]:
        return list(self._types)

    def __contains__(self, path: str) -> bool:
        return path in self._types

    def __len__(self) -> int:
        return len(self._types)


def build_registry(
    document_root: Element,
    extractor: Optional[ClassExtractor] = None,
    duplicate_policy: str = "overwrite"
) -> Tuple[TypeRegistry, List[Diagnostic]]:
    """문서 루트의 모든 최상위 정의를 추출하여 레지스트리 구성

    클래스가 아닌 최상위 노드는 경고 후 건너뜁니다.

    Args:
        document_root: XML 문서 루트 (<haxe>)
        extractor: 클래스 추출기 (없으면 기본값)
        duplicate_policy: overwrite 또는 reject

    Returns:
        (고정된 레지스트리, 진단 목록)
    """
    extractor = extractor or ClassExtractor()
    registry = TypeRegistry(duplicate_policy=duplicate_policy)
    diagnostics: List[Diagnostic] = []

    for node in document_root:
        try:
            class_def = extractor.extract(node)
        except UnrecognizedTopLevelNode as e:
            logger.warning(f"최상위 요소 건너뜀: <{e.tag}> {e.path or ''}")
            diagnostics.append(Diagnostic(
                code="unrecognized_top_level",
                message=str(e),
                path=e.path,
            ))
            continue

        if registry.register(class_def):
            diagnostics.append(Diagnostic(
                code="duplicate_path",
                message=f"중복 경로 덮어씀: {class_def.path}",
                path=class_def.path,
            ))

    registry.freeze()
    logger.info(f"레지스트리 구성: {len(registry)}개 클래스, 진단 {len(diagnostics)}건")
    return registry, diagnostics
