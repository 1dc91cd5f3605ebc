"""
Haxe XML → TypeScript 선언 변환 파이프라인
읽기 → 추출/등록 → 트리 구성 → 출력 → 저장 순서로 한 번에 실행합니다.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from xml.etree.ElementTree import Element

from dts_generator import DTSGenerator, NamespaceNode, build_tree
from haxe_dump import ClassExtractor, TypeRegistry, TypeResolver, build_registry, read_dump
from shared_config import Diagnostic, TranslatorConfig
from shared_config.logger import LogStage, log_step, logger


@dataclass
class TranslationResult:
    """변환 결과"""
    text: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    registry: Optional[TypeRegistry] = None
    tree: Optional[NamespaceNode] = None

    @property
    def class_count(self) -> int:
        return len(self.registry) if self.registry is not None else 0

    def to_dict(self) -> dict:
        return {
            "class_count": self.class_count,
            "output_length": len(self.text),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


def create_generator(config: TranslatorConfig) -> DTSGenerator:
    """설정으로 DTSGenerator 생성"""
    return DTSGenerator(
        allowed_namespaces=config.allowed_namespaces,
        type_aliases=config.type_aliases,
        constructor_name=config.constructor_name,
        emit_static_methods=config.emit_static_methods,
        module_imports=config.module_imports,
    )


def translate(
    document_root: Element,
    config: Optional[TranslatorConfig] = None
) -> TranslationResult:
    """
    파싱된 덤프 문서를 .d.ts 텍스트로 변환

    Args:
        document_root: XML 문서 루트
        config: 변환 설정 (없으면 기본값)

    Returns:
        TranslationResult (텍스트 + 진단)

    Raises:
        MalformedTypeNode, UnsupportedTypeKind, DuplicateTypePath
    """
    config = config or TranslatorConfig()

    resolver = TypeResolver(
        nullable_wrapper_path=config.nullable_wrapper_path,
        array_wrapper_paths=config.array_wrapper_paths,
    )
    extractor = ClassExtractor(resolver)

    with LogStage("클래스 추출", nodes=len(document_root)):
        registry, diagnostics = build_registry(
            document_root,
            extractor=extractor,
            duplicate_policy=config.duplicate_policy,
        )

    with LogStage("네임스페이스 트리 구성", types=len(registry)):
        tree = build_tree(registry)

    with LogStage("선언 출력"):
        text = create_generator(config).generate(tree)

    return TranslationResult(text=text, diagnostics=diagnostics, registry=registry, tree=tree)


@log_step("덤프 파일 변환")
def translate_file(
    input_path: str,
    output_path: str,
    config: Optional[TranslatorConfig] = None
) -> TranslationResult:
    """
    덤프 파일을 읽어 변환하고, 성공한 경우에만 결과 파일 저장

    Returns:
        TranslationResult
    """
    config = config or TranslatorConfig()

    with LogStage("덤프 읽기", file=input_path):
        document_root = read_dump(input_path)

    result = translate(document_root, config)

    with LogStage("선언 파일 저장", file=output_path):
        create_generator(config).write(result.text, output_path)

    for diagnostic in result.diagnostics:
        logger.debug(f"진단: {diagnostic.code} {diagnostic.path or ''}")
    return result
