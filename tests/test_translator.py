"""
translator / main 통합 테스트
"""
import json
import pytest
import os
import sys

# 상위 디렉토리를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from haxe_dump import parse_dump
from main import main
from shared_config import TranslatorConfig, UnsupportedTypeKind, MalformedTypeNode
from translator import translate, translate_file


FOO_DUMP = '''<?xml version="1.0" encoding="utf-8"?>
<haxe>
    <class path="pkg.Foo" params="" file="src/pkg/Foo.hx">
        <x public="1"><x path="Int"/></x>
        <new public="1" set="method" line="5"><f a="y"><x path="Int"/><x path="Void"/></f></new>
        <haxe_doc>예제 클래스</haxe_doc>
    </class>
    <typedef path="pkg.Alias"><x path="Int"/></typedef>
    <class path="hidden.Thing"><v public="1"><x path="Int"/></v></class>
</haxe>
'''

FOO_DTS = (
    'declare module "pkg" {\n'
    '    export class Foo {\n'
    '        public x: number;\n'
    '        constructor(y: number);\n'
    '    }\n'
    '}\n'
)

BROKEN_DUMP = '''
<haxe>
    <class path="pkg.Foo"><inner public="1"><class path="pkg.Inner"/></inner></class>
</haxe>
'''


class TestTranslate:
    """translate 테스트"""

    @pytest.fixture
    def config(self):
        return TranslatorConfig(allowed_namespaces=["pkg"])

    def test_end_to_end(self, config):
        result = translate(parse_dump(FOO_DUMP), config)
        assert result.text == FOO_DTS
        assert result.class_count == 2

    def test_diagnostics(self, config):
        result = translate(parse_dump(FOO_DUMP), config)
        assert [d.code for d in result.diagnostics] == ["unrecognized_top_level"]
        assert result.to_dict()["diagnostics"][0]["path"] == "pkg.Alias"

    def test_tree_exposed(self, config):
        result = translate(parse_dump(FOO_DUMP), config)
        assert sorted(result.tree.child_namespaces) == ["hidden", "pkg"]

    def test_default_config_emits_everything(self):
        result = translate(parse_dump(FOO_DUMP))
        assert 'declare module "hidden"' in result.text

    def test_config_wrapper_paths(self):
        dump = '<haxe><class path="p.A"><xs public="1"><c path="my.Vec"><x path="Int"/></c></xs></class></haxe>'
        config = TranslatorConfig(array_wrapper_paths=["my.Vec"])
        assert "public xs: number[];" in translate(parse_dump(dump), config).text

    def test_unsupported_type_is_fatal(self):
        with pytest.raises(UnsupportedTypeKind):
            translate(parse_dump(BROKEN_DUMP))

    def test_malformed_type_is_fatal(self):
        dump = '<haxe><class path="p.A"><v public="1"><x/></v></class></haxe>'
        with pytest.raises(MalformedTypeNode):
            translate(parse_dump(dump))


class TestTranslateFile:
    """translate_file 테스트"""

    def test_writes_output(self, tmp_path):
        input_path = tmp_path / "types.xml"
        input_path.write_text(FOO_DUMP, encoding="utf-8")
        output_path = tmp_path / "out" / "types.d.ts"

        result = translate_file(str(input_path), str(output_path), TranslatorConfig(allowed_namespaces=["pkg"]))

        assert output_path.read_text(encoding="utf-8") == FOO_DTS
        assert result.text == FOO_DTS

    def test_no_output_on_failure(self, tmp_path):
        input_path = tmp_path / "broken.xml"
        input_path.write_text(BROKEN_DUMP, encoding="utf-8")
        output_path = tmp_path / "broken.d.ts"

        with pytest.raises(UnsupportedTypeKind):
            translate_file(str(input_path), str(output_path))
        assert not output_path.exists()

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            translate_file(str(tmp_path / "missing.xml"), str(tmp_path / "out.d.ts"))


class TestMain:
    """CLI 테스트"""

    @pytest.fixture
    def input_path(self, tmp_path):
        path = tmp_path / "types.xml"
        path.write_text(FOO_DUMP, encoding="utf-8")
        return path

    def test_success(self, tmp_path, input_path, capsys):
        output_path = tmp_path / "types.d.ts"
        code = main(["-i", str(input_path), "-o", str(output_path), "--namespace", "pkg"])
        assert code == 0
        assert output_path.read_text(encoding="utf-8") == FOO_DTS
        assert "2 classes" in capsys.readouterr().out

    def test_json_summary(self, tmp_path, input_path, capsys):
        output_path = tmp_path / "types.d.ts"
        code = main(["-i", str(input_path), "-o", str(output_path), "--namespace", "pkg", "--json"])
        assert code == 0

        summary = json.loads(capsys.readouterr().out)
        assert summary["class_count"] == 2
        assert summary["output_length"] == len(FOO_DTS)
        assert [d["code"] for d in summary["diagnostics"]] == ["unrecognized_top_level"]
        assert summary["diagnostics"][0]["path"] == "pkg.Alias"

    def test_config_file(self, tmp_path, input_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("allowed_namespaces: [hidden]\n", encoding="utf-8")
        output_path = tmp_path / "types.d.ts"

        assert main(["-i", str(input_path), "-o", str(output_path), "-c", str(config_path)]) == 0
        content = output_path.read_text(encoding="utf-8")
        assert content.startswith('declare module "hidden" {')
        assert "pkg" not in content

    def test_failure_exit_code(self, tmp_path, capsys):
        input_path = tmp_path / "broken.xml"
        input_path.write_text(BROKEN_DUMP, encoding="utf-8")
        output_path = tmp_path / "broken.d.ts"

        assert main(["-i", str(input_path), "-o", str(output_path)]) == 1
        assert not output_path.exists()
        assert "Error:" in capsys.readouterr().err

    def test_invalid_xml(self, tmp_path):
        input_path = tmp_path / "bad.xml"
        input_path.write_text("<haxe><class></haxe>", encoding="utf-8")
        assert main(["-i", str(input_path), "-o", str(tmp_path / "bad.d.ts")]) == 1

    def test_required_arguments(self):
        with pytest.raises(SystemExit):
            main(["-i", "only-input.xml"])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
