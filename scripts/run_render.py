"""
선언 파일 렌더링 실행 스크립트.

TypeScript 선언 파일 하나를 파싱하여 Markdown 참조 문서를 출력한다.

사용법:
    python scripts/run_render.py types/index.d.ts
    python scripts/run_render.py types/index.d.ts --preview   # 터미널에서 서식 적용해 보기
    python scripts/run_render.py types/index.d.ts --json      # 추출된 메타데이터를 JSON으로
"""

import argparse
import json
import logging
import sys
from collections import Counter
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown

from typejuice.config import Settings
from typejuice.document import TypeJuice

console = Console()


def main() -> None:
    parser = argparse.ArgumentParser(description="TypeScript 선언 파일을 Markdown으로 렌더링한다.")
    parser.add_argument("path", type=Path, help="선언 파일 경로 (.ts / .d.ts)")
    parser.add_argument("--preview", action="store_true", help="rich로 서식을 적용해 출력")
    parser.add_argument("--json", action="store_true", help="추출된 구조를 JSON으로 출력")
    args = parser.parse_args()

    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True))],
    )

    tj = TypeJuice(args.path, settings=settings)

    if args.json:
        payload = [entry.model_dump() for entry in tj.structure]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    markdown = tj.to_markdown()
    if args.preview:
        kind_counts = Counter(entry.kind for entry in tj.structure)
        console.rule(f"[bold blue]{args.path.name}")
        for kind, count in kind_counts.most_common():
            console.print(f"  {kind:10}: {count}개")
        console.print()
        console.print(Markdown(markdown))
    else:
        sys.stdout.write(markdown)


if __name__ == "__main__":
    main()
