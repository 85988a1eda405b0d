"""
포함 지시자 확장 실행 스크립트.

Markdown 문서의 `<<< typejuice:<경로>` 줄을 렌더링된 선언 문서로 바꿔 출력한다.

사용법:
    python scripts/run_include.py docs/api.md --type-root types
    python scripts/run_include.py docs/api.md -o build/api.md
"""

import argparse
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rich.console import Console
from rich.logging import RichHandler

from typejuice.config import Settings
from typejuice.include import expand_file

console = Console(stderr=True)


def main() -> None:
    parser = argparse.ArgumentParser(description="Markdown 문서의 typejuice 포함 지시자를 확장한다.")
    parser.add_argument("document", type=Path, help="Markdown 문서 경로")
    parser.add_argument("--type-root", type=Path, default=None, help="지시자 경로의 기준 디렉토리")
    parser.add_argument("-o", "--output", type=Path, default=None, help="결과 파일 경로 (기본: 표준 출력)")
    args = parser.parse_args()

    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console)],
    )

    expanded = expand_file(args.document, type_root=args.type_root, settings=settings)

    if args.output is None:
        sys.stdout.write(expanded)
        return
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(expanded, encoding="utf-8")
    console.print(f"[green]저장 완료:[/green] {args.output}")


if __name__ == "__main__":
    main()
