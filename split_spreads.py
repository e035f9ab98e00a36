#!/usr/bin/env python3
"""
Batch-split double-page (spread) PDFs into single pages, down the middle.
- Landscape pages are cut vertically (left + right), portrait pages horizontally (top + bottom).
- Each output has twice the pages of its input; the halves are cropped, content is untouched.
- Optionally reorders pages of documents scanned starting from the last sheet.

Usage:
  python split_spreads.py --input "/path/to/folder_or_file" --output "/path/to/output_folder"

Examples:
  # Process all PDFs in a folder
  python split_spreads.py -i "./in" -o "./out"

  # Name outputs after their number in the batch, replace existing files
  python split_spreads.py -i a.pdf b.pdf -o ./out --prefix "book_[FILENUMBER]" --overwrite

  # Scanned starting from the last sheet
  python split_spreads.py -i scan.pdf -o ./out --repagination last-first

Requirements:
  pip install pypdf

Notes:
- Units are PDF points (1 point = 1/72 inch). The split uses each page's trim box.
- Prefix placeholders: [BASENAME], [FILENUMBER], [TIMESTAMP].
"""

import argparse
import logging
import sys
from pathlib import Path

from spreadsplit import DirectoryOutput, PdfSource, Repagination, SplitParameters, run_batch
from spreadsplit.documents import PDF_VERSIONS
from spreadsplit.exceptions import SplitSpreadsError
from spreadsplit.logging import get_logger, set_level, setup_file_logging

logger = get_logger("spreadsplit")


def iter_pdf_files(path_str: str):
    p = Path(path_str)
    if p.is_dir():
        yield from sorted(f for f in p.iterdir() if f.is_file() and f.suffix.lower() == ".pdf")
    elif p.is_file() and p.suffix.lower() == ".pdf":
        yield p
    else:
        logger.warning("'%s' is neither a PDF file nor a directory containing PDFs.", path_str)


class ConsoleProgress:
    def report(self, current_step: int, total_steps: int) -> None:
        print(f"[{current_step}/{total_steps}] done")


def build_parser():
    ap = argparse.ArgumentParser(description="Split double-page spreads into single pages.")
    ap.add_argument("-i", "--input", required=True, nargs="+",
                    help="Input PDF files and/or directories containing PDFs.")
    ap.add_argument("-o", "--output", required=True, help="Output directory to write processed PDFs.")
    ap.add_argument("-p", "--prefix", type=str, default="[BASENAME]_split",
                    help="Output name prefix, may contain [BASENAME], [FILENUMBER], [TIMESTAMP]. "
                         "Default: [BASENAME]_split")
    ap.add_argument("--overwrite", action="store_true", help="Replace existing files in the output directory.")
    ap.add_argument("--pdf-version", choices=PDF_VERSIONS, default=None,
                    help="PDF version of the outputs. Default: same as the input.")
    ap.add_argument("--repagination", choices=[r.value for r in Repagination], default=Repagination.NONE.value,
                    help="'last-first' reorders documents scanned starting from the last sheet. Default: none")
    ap.add_argument("--password", type=str, default=None, help="Password of encrypted inputs.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every step.")
    ap.add_argument("--log-dir", type=str, default=None, help="Also write a detailed log file in this directory.")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_level(logging.DEBUG)
    if args.log_dir:
        setup_file_logging(args.log_dir)

    inputs = [f for path in args.input for f in iter_pdf_files(path)]
    if not inputs:
        print("No PDF files found to process.", file=sys.stderr)
        return 1

    parameters = SplitParameters(
        source_list=[PdfSource(p, password=args.password) for p in inputs],
        output=DirectoryOutput(args.output),
        output_prefix=args.prefix,
        overwrite=args.overwrite,
        version=args.pdf_version,
        repagination=Repagination(args.repagination),
    )

    print(f"Processing {len(inputs)} file(s)...")
    try:
        run_batch(parameters, notifier=ConsoleProgress())
    except SplitSpreadsError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
