"""
Haxe XML → TypeScript 선언 변환기의 메인 진입점입니다.
커맨드 라인 인자를 처리하고 변환 작업을 시작합니다.
"""
import argparse
import json
import sys
from xml.etree.ElementTree import ParseError

from shared_config import TranslationError, TranslatorConfig
from shared_config.logger import set_console_level, setup_file_logging
from translator import translate_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Haxe XML type dump to TypeScript declarations')
    parser.add_argument('-i', '--input', required=True, metavar='INPUT', help='input file (haxe -xml output)')
    parser.add_argument('-o', '--output', required=True, metavar='OUTPUT', help='output file (.d.ts)')
    parser.add_argument('-c', '--config', metavar='CONFIG', help='YAML config file')
    parser.add_argument('--namespace', action='append', metavar='NAME',
                        help='top-level namespace to emit (repeatable, overrides config)')
    parser.add_argument('--log-dir', metavar='DIR', help='write log files to DIR')
    parser.add_argument('--json', action='store_true', help='print a JSON summary instead of the one-line report')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_console_level("DEBUG")
    if args.log_dir:
        setup_file_logging(args.log_dir)

    try:
        config = TranslatorConfig.from_yaml(args.config) if args.config else TranslatorConfig()
        if args.namespace:
            config.allowed_namespaces = args.namespace
        result = translate_file(args.input, args.output, config)
    except (TranslationError, ParseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(f"Wrote {args.output} ({result.class_count} classes, {len(result.diagnostics)} warnings)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
