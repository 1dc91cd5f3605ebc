"""
변환기 설정 모듈

TranslatorConfig 클래스를 통해 변환 동작을 설정합니다.
YAML 파일에서 로드할 수 있습니다.

YAML 예시:
    allowed_namespaces: [nape, zpp_nape]
    type_aliases:
      Bool: boolean
    module_imports:
      nape: [zpp_nape, nape]
    duplicate_policy: reject
"""
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from loguru import logger

from .errors import ConfigError
from .type_mappings import HAXE_TO_TS_TYPE_MAP, merge_type_aliases

DUPLICATE_POLICIES = ("overwrite", "reject")


@dataclass
class TranslatorConfig:
    """Haxe XML → TypeScript 선언 변환 설정"""

    # 출력할 최상위 네임스페이스 (None이면 전부)
    allowed_namespaces: Optional[List[str]] = None

    # Haxe 기본 타입 → TypeScript 타입
    type_aliases: Dict[str, str] = field(default_factory=lambda: dict(HAXE_TO_TS_TYPE_MAP))

    # 래퍼 타입 경로
    nullable_wrapper_path: str = "Null"
    array_wrapper_paths: Tuple[str, ...] = ("Array", "nape.TArray")

    # 생성자 메소드 이름
    constructor_name: str = "new"

    # static 메소드 출력 여부
    emit_static_methods: bool = False

    # 경로 충돌 처리 (overwrite, reject)
    duplicate_policy: str = "overwrite"

    # 네임스페이스 전체 점 경로(예: "nape", "nape.geom") → 블록 첫머리에 넣을 import 별칭 목록
    # 키는 전체 경로와 정확히 일치해야 하며, 같은 이름의 하위 네임스페이스에는 적용되지 않음
    module_imports: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        if self.duplicate_policy not in DUPLICATE_POLICIES:
            raise ConfigError(
                f"duplicate_policy는 {DUPLICATE_POLICIES} 중 하나여야 합니다: {self.duplicate_policy}"
            )
        if not isinstance(self.array_wrapper_paths, (list, tuple)):
            raise ConfigError(
                f"array_wrapper_paths는 경로 목록이어야 합니다: {self.array_wrapper_paths!r}"
            )
        self.array_wrapper_paths = tuple(self.array_wrapper_paths)

    def is_namespace_allowed(self, name: str) -> bool:
        """최상위 네임스페이스 출력 여부"""
        return self.allowed_namespaces is None or name in self.allowed_namespaces

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TranslatorConfig":
        """딕셔너리에서 설정 생성 (알 수 없는 키는 경고 후 무시)"""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("잘못된 설정 형식: 딕셔너리가 필요합니다")

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"알 수 없는 설정 키 무시: {key}")
                continue
            kwargs[key] = value

        _check_type(kwargs, "allowed_namespaces", list, optional=True)
        _check_type(kwargs, "type_aliases", dict)
        _check_type(kwargs, "nullable_wrapper_path", str)
        _check_type(kwargs, "array_wrapper_paths", list)
        _check_type(kwargs, "constructor_name", str)
        _check_type(kwargs, "emit_static_methods", bool)
        _check_type(kwargs, "duplicate_policy", str)
        _check_type(kwargs, "module_imports", dict)

        if "type_aliases" in kwargs:
            kwargs["type_aliases"] = merge_type_aliases(
                {str(k): str(v) for k, v in kwargs["type_aliases"].items()}
            )
        if "module_imports" in kwargs:
            imports = {}
            for namespace, aliases in kwargs["module_imports"].items():
                if not isinstance(aliases, list):
                    raise ConfigError(f"module_imports.{namespace}는 리스트여야 합니다")
                imports[str(namespace)] = [str(a) for a in aliases]
            kwargs["module_imports"] = imports

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str) -> "TranslatorConfig":
        """
        YAML 설정 파일 로드

        Raises:
            ConfigError: 파일이 없거나 YAML 파싱 실패
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigError(f"설정 파일을 찾을 수 없습니다: {path}")

        logger.info(f"설정 파일 로드: {path}")
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"YAML 파싱 오류: {e}") from e

        return cls.from_dict(data)

    def to_dict(self) -> dict:
        """딕셔너리로 변환 (YAML 저장용)"""
        return {
            "allowed_namespaces": self.allowed_namespaces,
            "type_aliases": dict(self.type_aliases),
            "nullable_wrapper_path": self.nullable_wrapper_path,
            "array_wrapper_paths": list(self.array_wrapper_paths),
            "constructor_name": self.constructor_name,
            "emit_static_methods": self.emit_static_methods,
            "duplicate_policy": self.duplicate_policy,
            "module_imports": {k: list(v) for k, v in self.module_imports.items()},
        }


def _check_type(kwargs: Dict[str, Any], key: str, expected: type, optional: bool = False):
    if key not in kwargs:
        return
    value = kwargs[key]
    if value is None and optional:
        return
    if not isinstance(value, expected):
        raise ConfigError(f"{key}의 타입이 잘못되었습니다: {expected.__name__} 필요")
