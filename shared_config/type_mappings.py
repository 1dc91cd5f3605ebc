"""
타입 변환 매핑 설정
Haxe 기본 타입 → TypeScript 기본 타입 별칭 테이블.
새로운 타입 추가/수정 시 이 파일(또는 설정 YAML의 type_aliases)만 수정하면 됩니다.
"""
from typing import Dict, Optional

# =============================================================================
# Haxe 경로 → TypeScript 타입 매핑
# =============================================================================
HAXE_TO_TS_TYPE_MAP = {
    "Float": "number",
    "Int": "number",
    "UInt": "number",
    "Bool": "boolean",
    "Void": "void",
    "String": "string",
}

# Dynamic 타입 출력 토큰
DYNAMIC_TS_TYPE = "any"


# =============================================================================
# 헬퍼 함수
# =============================================================================

def get_ts_type(haxe_path: str, aliases: Optional[Dict[str, str]] = None) -> str:
    """Haxe 경로를 TypeScript 타입으로 변환 (매핑 없으면 경로 그대로)"""
    table = HAXE_TO_TS_TYPE_MAP if aliases is None else aliases
    return table.get(haxe_path, haxe_path)


def merge_type_aliases(overrides: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """기본 매핑 위에 사용자 매핑을 덮어쓴 새 테이블 반환"""
    merged = dict(HAXE_TO_TS_TYPE_MAP)
    if overrides:
        merged.update(overrides)
    return merged
