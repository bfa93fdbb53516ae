#!/usr/bin/env python3
"""
cli_app.py - Bilingual quiz merger CLI

Merges two quiz documents that share the same table layout (one per
language) into a single DOCX whose question stems and options carry
{mlang <tag>}...{mlang} markup for both languages.

Usage examples:
  python cli_app.py quiz_en.docx quiz_uk.docx --lang1 en --lang2 uk
  python cli_app.py quiz_en.docx quiz_uk.docx --lang1 en --lang2 uk -o merged.docx --no-debug

Language codes and the output name default to BILINGUAL_LANG1,
BILINGUAL_LANG2 and BILINGUAL_OUTPUT_NAME (see backend/config.py).
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from backend.bilingual.pipeline import MergeJob, set_debug
from backend.config import load_settings


def build_parser(defaults) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Merge two single-language quiz DOCX files into one bilingual DOCX",
    )
    ap.add_argument("first_docx", help="Quiz document in the first language")
    ap.add_argument("second_docx", help="The same quiz in the second language")
    ap.add_argument("--lang1", default=defaults.lang1, help="Language code of the first document")
    ap.add_argument("--lang2", default=defaults.lang2, help="Language code of the second document")
    ap.add_argument(
        "-o",
        "--out",
        default=defaults.output_name,
        help=f"Path to write the merged .docx (default: {defaults.output_name})",
    )
    ap.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        default=defaults.debug,
        help="Verbose debug output",
    )
    ap.add_argument(
        "--no-debug",
        dest="debug",
        action="store_false",
        help="Disable debug output",
    )
    return ap


def report_status(message: str) -> None:
    """Progress goes to stdout, failures to stderr."""
    if message.startswith("Error:"):
        print(message, file=sys.stderr)
    else:
        print(message)


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    ap = build_parser(settings)
    args = ap.parse_args(argv)

    set_debug(args.debug)
    settings.debug = args.debug
    settings.output_name = os.path.basename(args.out)

    for path in (args.first_docx, args.second_docx):
        if not os.path.isfile(path):
            print(f"Error: '{path}' does not exist.", file=sys.stderr)
            return 1

    job = MergeJob(settings, on_status=report_status)
    outcome = job.run(args.first_docx, args.second_docx, args.lang1, args.lang2, out_path=args.out)
    if not outcome.ok:
        return 1
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
