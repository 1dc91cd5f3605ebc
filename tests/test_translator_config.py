"""
shared_config 모듈 테스트 - 설정, 네이밍 규칙, 타입 매핑
"""
import pytest
import os
import sys

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shared_config import (
    ConfigError,
    LogStage,
    TranslatorConfig,
    display_arg_name,
    get_ts_type,
    log_step,
    logger,
    parse_arg_name,
    set_console_level,
    setup_file_logging,
    short_name,
    split_path,
)


class TestTranslatorConfig:
    """TranslatorConfig 테스트"""

    def test_defaults(self):
        config = TranslatorConfig()
        assert config.allowed_namespaces is None
        assert config.type_aliases["Int"] == "number"
        assert config.array_wrapper_paths == ("Array", "nape.TArray")
        assert config.constructor_name == "new"
        assert config.emit_static_methods is False
        assert config.duplicate_policy == "overwrite"

    def test_is_namespace_allowed(self):
        assert TranslatorConfig().is_namespace_allowed("anything")
        config = TranslatorConfig(allowed_namespaces=["nape", "zpp_nape"])
        assert config.is_namespace_allowed("nape")
        assert not config.is_namespace_allowed("sandbox")

    def test_from_yaml(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "allowed_namespaces: [nape, zpp_nape]\n"
            "type_aliases:\n"
            "  Bool: bool\n"
            "module_imports:\n"
            "  nape: [zpp_nape, nape]\n"
            "emit_static_methods: true\n"
            "duplicate_policy: reject\n",
            encoding="utf-8",
        )
        config = TranslatorConfig.from_yaml(str(config_path))

        assert config.allowed_namespaces == ["nape", "zpp_nape"]
        assert config.type_aliases["Bool"] == "bool"
        assert config.type_aliases["Int"] == "number"
        assert config.module_imports == {"nape": ["zpp_nape", "nape"]}
        assert config.emit_static_methods is True
        assert config.duplicate_policy == "reject"

    def test_empty_yaml(self, tmp_path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("", encoding="utf-8")
        assert TranslatorConfig.from_yaml(str(config_path)) == TranslatorConfig()

    def test_unknown_key_ignored(self):
        config = TranslatorConfig.from_dict({"colour": "blue", "constructor_name": "init"})
        assert config.constructor_name == "init"

    def test_invalid_policy(self):
        with pytest.raises(ConfigError):
            TranslatorConfig(duplicate_policy="merge")

    def test_invalid_value_type(self):
        with pytest.raises(ConfigError):
            TranslatorConfig.from_dict({"allowed_namespaces": "nape"})
        with pytest.raises(ConfigError):
            TranslatorConfig.from_dict({"module_imports": {"nape": "zpp_nape"}})

    def test_bare_string_wrapper_paths_rejected(self):
        with pytest.raises(ConfigError):
            TranslatorConfig(array_wrapper_paths="Array")

    def test_list_wrapper_paths_normalized(self):
        config = TranslatorConfig(array_wrapper_paths=["my.Vec"])
        assert config.array_wrapper_paths == ("my.Vec",)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            TranslatorConfig.from_dict(["nape"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            TranslatorConfig.from_yaml(str(tmp_path / "missing.yaml"))

    def test_broken_yaml(self, tmp_path):
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("allowed_namespaces: [nape\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            TranslatorConfig.from_yaml(str(config_path))

    def test_to_dict_roundtrip(self):
        config = TranslatorConfig(allowed_namespaces=["nape"], module_imports={"nape": ["nape"]})
        assert TranslatorConfig.from_dict(config.to_dict()) == config


class TestLogger:
    """logger 헬퍼 테스트"""

    def test_set_console_level(self):
        handler_id = set_console_level("DEBUG")
        assert isinstance(handler_id, int)
        set_console_level("INFO")

    def test_log_stage_propagates_errors(self):
        with pytest.raises(ValueError):
            with LogStage("실패 단계", items=1):
                raise ValueError("boom")

    def test_log_step_keeps_function(self):
        @log_step("합계 계산")
        def add(a, b):
            """두 수의 합"""
            return a + b

        assert add(1, 2) == 3
        assert add.__name__ == "add"
        assert add.__doc__ == "두 수의 합"

    def test_file_logging(self, tmp_path):
        handler_id = setup_file_logging(str(tmp_path / "logs"))
        try:
            assert (tmp_path / "logs").is_dir()
        finally:
            logger.remove(handler_id)


class TestNamingRules:
    """naming_rules 함수 테스트"""

    def test_split_path(self):
        assert split_path("nape.geom.Vec2") == (["nape", "geom"], "Vec2")
        assert split_path("Std") == ([], "Std")

    def test_short_name(self):
        assert short_name("flash.display.Sprite") == "Sprite"
        assert short_name("Sprite") == "Sprite"
        assert short_name(None) is None

    def test_parse_arg_name(self):
        assert parse_arg_name("?radius") == ("radius", True)
        assert parse_arg_name("x") == ("x", False)
        assert parse_arg_name("?") == ("", True)

    def test_display_arg_name(self):
        assert display_arg_name("x", 0) == "x"
        assert display_arg_name("", 2) == "__2"


class TestTypeMappings:
    """get_ts_type 테스트"""

    def test_mapped(self):
        assert get_ts_type("Float") == "number"
        assert get_ts_type("Void") == "void"

    def test_unmapped(self):
        assert get_ts_type("nape.geom.Vec2") == "nape.geom.Vec2"

    def test_custom_table(self):
        assert get_ts_type("Float", {"Float": "double"}) == "double"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
