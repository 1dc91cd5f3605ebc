"""
타입 참조 출력기
TypeValue를 TypeScript 타입 표현 문자열로 변환합니다.
"""
import os
import sys
from typing import Dict, Optional

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from haxe_dump import TypeKind, TypeValue
from shared_config import (
    DYNAMIC_TS_TYPE,
    HAXE_TO_TS_TYPE_MAP,
    UnsupportedTypeKind,
    display_arg_name,
    get_ts_type,
)

ARRAY_SUFFIX = "[]"


class TypeRefPrinter:
    """
    TypeValue → TypeScript 타입 문자열

    출력 규칙:
        FUNCTION  -> (a: T1, b: T2) => R
        DYNAMIC   -> any / any[]
        NORMAL    -> 별칭 테이블 적용한 경로 / 경로[]
        CLASS, ANONYMOUS -> UnsupportedTypeKind

    사용 예:
        printer = TypeRefPrinter()
        printer.format(NormalType("Int", is_array=True))  # "number[]"
    """

    def __init__(self, type_aliases: Optional[Dict[str, str]] = None):
        self.type_aliases = HAXE_TO_TS_TYPE_MAP if type_aliases is None else type_aliases

    def format(self, type_value: TypeValue, context: str = "") -> str:
        """
        타입 하나를 문자열로 변환

        Args:
            type_value: 출력할 타입
            context: 오류 메시지용 위치 (예: nape.geom.Vec2.x)

        Raises:
            UnsupportedTypeKind: 익명 타입, 인라인 클래스 참조
        """
        kind = type_value.kind

        if kind is TypeKind.FUNCTION:
            args = ", ".join(
                f"{display_arg_name(arg.name, i)}: {self.format(arg.type, context)}"
                for i, arg in enumerate(type_value.args)
            )
            return f"({args}) => {self.format(type_value.return_type, context)}"

        if kind is TypeKind.DYNAMIC:
            return self._with_array(DYNAMIC_TS_TYPE, type_value.is_array)

        if kind is TypeKind.NORMAL:
            ts_type = get_ts_type(type_value.path, self.type_aliases)
            return self._with_array(ts_type, type_value.is_array)

        # CLASS(인라인 참조), ANONYMOUS는 정규화된 형태가 없음
        raise UnsupportedTypeKind(kind, context)

    @staticmethod
    def _with_array(ts_type: str, is_array: bool) -> str:
        return f"{ts_type}{ARRAY_SUFFIX}" if is_array else ts_type
