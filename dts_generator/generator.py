"""
TypeScript 선언 파일 생성기
네임스페이스 트리를 중첩된 declare module / export namespace 블록으로 변환합니다.
"""
import os
from typing import Dict, Iterable, List, Optional
from pathlib import Path
import sys

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from haxe_dump import ClassDef, Method
from shared_config import display_arg_name
from shared_config.logger import logger
from .namespace_tree import NamespaceNode
from .type_printer import TypeRefPrinter

INDENT_UNIT = "    "


class DTSGenerator:
    """
    .d.ts 선언 생성 클래스

    출력 포맷:
        declare module "nape" {
            export namespace geom {
                export class Vec2 extends Base {
                    public x: number;
                    public static zero: nape.geom.Vec2;
                    constructor(x?: number, y?: number);
                    public length(): number;
                }
            }
        }

    - 최상위 네임스페이스는 allowed_namespaces에 있는 것만 출력
    - public이 아닌 멤버는 출력하지 않음
    - static 메소드는 emit_static_methods=True일 때만 출력

    사용 예:
        generator = DTSGenerator(allowed_namespaces=["nape"])
        content = generator.generate(build_tree(registry))
    """

    def __init__(
        self,
        allowed_namespaces: Optional[Iterable[str]] = None,
        type_aliases: Optional[Dict[str, str]] = None,
        constructor_name: str = "new",
        emit_static_methods: bool = False,
        module_imports: Optional[Dict[str, List[str]]] = None,
        output_dir: Optional[str] = None
    ):
        """
        Args:
            allowed_namespaces: 출력할 최상위 네임스페이스 (None이면 전부)
            type_aliases: Haxe → TypeScript 기본 타입 매핑
            constructor_name: 생성자 메소드 이름
            emit_static_methods: static 메소드 출력 여부
            module_imports: 네임스페이스 전체 점 경로 → import 별칭 목록 (경로가 정확히 일치하는 블록에만 적용)
            output_dir: 출력 디렉토리 (파일 저장할 경우)
        """
        self.allowed_namespaces = None if allowed_namespaces is None else set(allowed_namespaces)
        self.type_printer = TypeRefPrinter(type_aliases)
        self.constructor_name = constructor_name
        self.emit_static_methods = emit_static_methods
        self.module_imports = module_imports or {}
        self.output_dir = output_dir

        self._buffer: List[str] = []
        self._depth = 0

    # =========================================================================
    # 출력 버퍼
    # =========================================================================

    def _indent(self):
        self._depth += 1

    def _outdent(self):
        self._depth -= 1

    def _print_line(self, text: str):
        self._buffer.append(INDENT_UNIT * self._depth)
        self._buffer.append(text)
        self._buffer.append("\n")

    # =========================================================================
    # 생성
    # =========================================================================

    def generate(self, root: NamespaceNode) -> str:
        """
        루트 네임스페이스에서 선언 파일 전체 내용 생성

        오류가 나면 예외가 그대로 전파되고, 부분 결과는 반환하지 않습니다.

        Returns:
            .d.ts 파일 내용 문자열
        """
        self._buffer = []
        self._depth = 0

        for namespace in root.sorted_namespaces():
            if not self._is_allowed(namespace.name):
                logger.debug(f"허용 목록에 없는 네임스페이스 건너뜀: {namespace.name}")
                continue
            self._print_namespace(namespace)

        content = "".join(self._buffer)
        self._buffer = []
        return content

    def _is_allowed(self, name: str) -> bool:
        return self.allowed_namespaces is None or name in self.allowed_namespaces

    def _print_namespace(self, namespace: NamespaceNode):
        """네임스페이스 블록 하나 (자식 네임스페이스 → 자식 클래스 순)"""
        if namespace.is_top_level:
            self._print_line(f'declare module "{namespace.name}" {{')
        else:
            self._print_line(f"export namespace {namespace.name} {{")
        self._indent()

        for alias in self.module_imports.get(namespace.dotted_path, []):
            self._print_line(f'import {alias} = require("{alias}");')

        for child in namespace.sorted_namespaces():
            self._print_namespace(child)

        for class_def in namespace.sorted_defs():
            self._print_class(class_def)

        self._outdent()
        self._print_line("}")

    def _print_class(self, class_def: ClassDef):
        """클래스 선언 하나"""
        header = f"export class {class_def.name}"
        if class_def.parent_path:
            header += f" extends {class_def.parent_name}"
        self._print_line(f"{header} {{")
        self._indent()

        for field in class_def.fields:
            if field.is_public:
                field_type = self.type_printer.format(field.type, f"{class_def.path}.{field.name}")
                self._print_line(f"public {field.name}: {field_type};")

        for field in class_def.static_fields:
            if field.is_public:
                field_type = self.type_printer.format(field.type, f"{class_def.path}.{field.name}")
                self._print_line(f"public static {field.name}: {field_type};")

        for method in class_def.methods:
            if method.is_public:
                self._print_line(self._format_method(class_def, method, is_static=False))

        if self.emit_static_methods:
            for method in class_def.static_methods:
                if method.is_public:
                    self._print_line(self._format_method(class_def, method, is_static=True))

        self._outdent()
        self._print_line("}")

    def _format_method(self, class_def: ClassDef, method: Method, is_static: bool) -> str:
        """메소드/생성자 선언 한 줄"""
        context = f"{class_def.path}.{method.name}"
        params = ", ".join(
            f"{display_arg_name(arg.name, i)}{'?' if arg.optional else ''}: "
            f"{self.type_printer.format(arg.type, context)}"
            for i, arg in enumerate(method.signature.args)
        )

        if not is_static and method.name == self.constructor_name:
            return f"constructor({params});"

        return_type = self.type_printer.format(method.signature.return_type, context)
        modifier = "public static" if is_static else "public"
        return f"{modifier} {method.name}({params}): {return_type};"

    # =========================================================================
    # 저장
    # =========================================================================

    def write(self, content: str, file_name: str) -> str:
        """
        선언 내용을 파일로 저장 (UTF-8)

        Args:
            content: .d.ts 내용
            file_name: 파일 경로 (output_dir가 있으면 그 아래 상대 경로)

        Returns:
            저장된 파일 경로
        """
        file_path = Path(self.output_dir) / file_name if self.output_dir else Path(file_name)

        # 디렉토리 생성
        file_path.parent.mkdir(parents=True, exist_ok=True)

        # 임시 파일에 쓴 뒤 교체 (중간 실패 시 잘린 파일이 남지 않음)
        temp_path = file_path.with_name(file_path.name + ".tmp")
        try:
            with open(temp_path, 'w', encoding='utf-8') as f:
                f.write(content)
            temp_path.replace(file_path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

        logger.info(f"선언 파일 저장: {file_path} ({len(content)}자)")
        return str(file_path)
