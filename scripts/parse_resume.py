"""Parse a résumé file into the editor's JSON record without any AI service.

Usage
-----

    python scripts/parse_resume.py data/curriculo.pdf --output parsed.json
    cat curriculo.txt | python scripts/parse_resume.py - --locale pt_BR --merge

The output is the structure returned by
``resume_parsing.parser.parse_resume_locally``; with ``--merge`` it is
laid over a blank editable résumé first.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from data_loader import load_resume  # noqa: E402
from resume_parsing.locale_rules import available_locales  # noqa: E402
from resume_parsing.parser import parse_resume_locally, set_debug  # noqa: E402
from services.resume_schema import merge_parsed_resume  # noqa: E402

logger = logging.getLogger("parse_resume")


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return load_resume(source)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Parse résumé text into structured JSON (offline heuristics)")
    parser.add_argument("source", help="Path to a PDF/DOCX/TXT résumé, or '-' to read text from stdin")
    parser.add_argument("--locale", default=None, choices=available_locales(), help="Keyword/format rules to apply")
    parser.add_argument("--merge", action="store_true", help="Merge the result over a blank editable résumé")
    parser.add_argument("--debug", action="store_true", help="Log each parsing step")
    parser.add_argument("--output", default=None, help="Destination JSON file (default: stdout)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if args.debug:
        set_debug(True)

    try:
        text = _read_source(args.source)
    except (FileNotFoundError, ValueError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    result = parse_resume_locally(text, locale=args.locale)
    if args.merge:
        result = merge_parsed_resume(result)

    payload = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n", encoding="utf-8")
        logger.info("wrote parsed résumé to %s", output_path)
    else:
        print(payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
