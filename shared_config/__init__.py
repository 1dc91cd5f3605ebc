"""
shared_config 모듈
포맷 마커, 타입 매핑, 네이밍 규칙, 오류 정의, 설정, 로거를 중앙 관리합니다.
"""

from .type_mappings import (
    HAXE_TO_TS_TYPE_MAP,
    DYNAMIC_TS_TYPE,
    get_ts_type,
    merge_type_aliases,
)

from .naming_rules import (
    PATH_SEPARATOR,
    split_path,
    short_name,
    parse_arg_name,
    display_arg_name,
)

from .errors import (
    TranslationError,
    MalformedTypeNode,
    UnsupportedTypeKind,
    UnrecognizedTopLevelNode,
    DuplicateTypePath,
    ConfigError,
    Diagnostic,
)

from .translator_config import TranslatorConfig

from .logger import (
    logger,
    setup_file_logging,
    set_console_level,
    LogStage,
    log_step,
)

__all__ = [
    # type_mappings
    "HAXE_TO_TS_TYPE_MAP",
    "DYNAMIC_TS_TYPE",
    "get_ts_type",
    "merge_type_aliases",
    # naming_rules
    "PATH_SEPARATOR",
    "split_path",
    "short_name",
    "parse_arg_name",
    "display_arg_name",
    # errors
    "TranslationError",
    "MalformedTypeNode",
    "UnsupportedTypeKind",
    "UnrecognizedTopLevelNode",
    "DuplicateTypePath",
    "ConfigError",
    "Diagnostic",
    # config
    "TranslatorConfig",
    # logger
    "logger",
    "setup_file_logging",
    "set_console_level",
    "LogStage",
    "log_step",
]
