"""
네임스페이스 트리 구성
레지스트리의 평면 경로 목록을 계층형 네임스페이스 트리로 변환합니다.
"""
from typing import Dict, List, Optional, Tuple

from haxe_dump import ClassDef, TypeRegistry
from shared_config import split_path
from shared_config.logger import logger


class NamespaceNode:
    """
    네임스페이스 노드

    자식 네임스페이스와 자식 정의를 소유합니다.
    부모는 참조하지 않고 자신의 경로(segments)만 기억합니다.
    부모 노드가 필요하면 루트에서 find(parent_path)로 찾습니다.
    """

    def __init__(self, name: Optional[str] = None, path: Tuple[str, ...] = ()):
        self.name = name
        self.path = path
        self.child_namespaces: Dict[str, "NamespaceNode"] = {}
        self.child_defs: Dict[str, ClassDef] = {}

    @property
    def is_root(self) -> bool:
        return not self.path

    @property
    def is_top_level(self) -> bool:
        """루트 바로 아래 네임스페이스인지"""
        return len(self.path) == 1

    @property
    def parent_path(self) -> Optional[Tuple[str, ...]]:
        return None if self.is_root else self.path[:-1]

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    def get_child(self, name: str, create: bool = False) -> Optional["NamespaceNode"]:
        """자식 네임스페이스 조회 (create=True면 없을 때 생성)"""
        child = self.child_namespaces.get(name)
        if child is None and create:
            child = NamespaceNode(name, self.path + (name,))
            self.child_namespaces[name] = child
        return child

    def add_def(self, key: str, class_def: ClassDef) -> None:
        self.child_defs[key] = class_def

    def find(self, path: Tuple[str, ...]) -> Optional["NamespaceNode"]:
        """이 노드 기준 상대 경로로 네임스페이스 찾기"""
        node = self
        for segment in path:
            node = node.child_namespaces.get(segment)
            if node is None:
                return None
        return node

    def sorted_namespaces(self) -> List["NamespaceNode"]:
        return [self.child_namespaces[k] for k in sorted(self.child_namespaces)]

    def sorted_defs(self) -> List[ClassDef]:
        return [self.child_defs[k] for k in sorted(self.child_defs)]

    def to_dict(self) -> dict:
        """구조 비교/디버깅용 딕셔너리"""
        return {
            "namespaces": {k: v.to_dict() for k, v in sorted(self.child_namespaces.items())},
            "defs": sorted(self.child_defs),
        }

    def __repr__(self) -> str:
        return (
            f"NamespaceNode({self.dotted_path or '<root>'}, "
            f"namespaces={len(self.child_namespaces)}, defs={len(self.child_defs)})"
        )


def insert_def(root: NamespaceNode, path: str, class_def: ClassDef) -> NamespaceNode:
    """경로를 따라 네임스페이스를 만들며 정의 삽입, 소속 네임스페이스 반환"""
    namespaces, leaf = split_path(path)
    owner = root
    for segment in namespaces:
        owner = owner.get_child(segment, create=True)
    owner.add_def(leaf, class_def)
    return owner


def build_tree(registry: TypeRegistry) -> NamespaceNode:
    """
    레지스트리 전체를 네임스페이스 트리로 변환

    Returns:
        루트 노드 (name=None)
    """
    root = NamespaceNode()
    for path, class_def in registry.items():
        insert_def(root, path, class_def)

    if root.child_defs:
        logger.debug(f"패키지 없는 클래스 {len(root.child_defs)}개는 출력되지 않습니다: "
                     f"{sorted(root.child_defs)}")
    logger.info(f"네임스페이스 트리 구성: 최상위 {len(root.child_namespaces)}개")
    return root
