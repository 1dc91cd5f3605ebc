"""
Haxe XML 덤프 읽기
haxe -xml 출력 파일을 ElementTree 루트로 로드합니다.
"""
import xml.etree.ElementTree as ET
from pathlib import Path
from xml.etree.ElementTree import Element

from shared_config.logger import logger


def parse_dump(content: str) -> Element:
    """XML 문자열을 파싱하여 문서 루트 반환"""
    return ET.fromstring(content)


def read_dump(file_path: str) -> Element:
    """
    XML 덤프 파일을 읽어서 문서 루트 반환

    Raises:
        FileNotFoundError: 파일이 없는 경우
        xml.etree.ElementTree.ParseError: XML 문법 오류
    """
    path = Path(file_path)
    if not path.exists():
        logger.error(f"파일을 찾을 수 없습니다: {file_path}")
        raise FileNotFoundError(f"파일을 찾을 수 없습니다: {file_path}")

    root = ET.parse(str(path)).getroot()
    logger.debug(f"덤프 로드: {file_path} (최상위 요소 {len(root)}개)")
    return root
