#!/usr/bin/env python3
"""
palette_report.py
Report the palette and smallest lossless PNG colour mode of images.

Usage:
  python palette_report.py INPUT [--outdir DIR] [--mode MODE] [--write-payloads] [--jobs N] [--debug]

Modes:
  auto            : pick the smallest lossless mode (default).
  grayscale, grayscale_alpha, indexed, truecolor, truecolor_alpha :
                    force a mode; fails for an image it cannot store losslessly.

Input:
  A Pillow-readable image, or a folder of them.

Output:
  A per-image report. With --write-payloads and an indexed mode, writes the raw
  PLTE payload to <stem>.plte and, for non-opaque palettes, the tRNS payload to
  <stem>.trns, next to INPUT or in --outdir.

Notes:
  Palette logic lives in the png_palette package; this script only wires it
  to files and prints.
"""

from __future__ import annotations

import argparse
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from png_palette.chunks import encode_palette_chunks
from png_palette.constants import IMAGE_EXTENSIONS, PLTE_SUFFIX, TRNS_SUFFIX
from png_palette.errors import PaletteError
from png_palette.mode import ColorMode, best_mode, channel_count, effective_mode
from png_palette.pixels import load_rgba, palette_from_image
from png_palette.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    format_yes_no,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)

# CLI args


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        outdir: optional Path for payload files
        mode: "auto" or a colour mode name
        write_payloads: bool
        jobs: parallel file workers
        debug: bool for verbose details
    """
    parser = argparse.ArgumentParser(
        prog="palette_report",
        description="Report distinct colours and the smallest lossless PNG colour mode.",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--outdir", type=Path, default=None, help="Output directory for payloads (optional)"
    )
    parser.add_argument(
        "--mode",
        choices=["auto"] + [m.name.lower() for m in ColorMode],
        default="auto",
        help="Colour mode; 'auto' picks the smallest lossless one.",
    )
    parser.add_argument(
        "--write-payloads",
        action="store_true",
        help="Write raw PLTE/tRNS payloads when the mode is indexed.",
    )
    parser.add_argument("--jobs", type=int, default=1, help="Files processed in parallel")
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser.parse_args(argv)


def _payload_paths(src_path: Path, outdir: Optional[Path]) -> Tuple[Path, Path]:
    folder = outdir or src_path.parent
    return (
        folder / f"{src_path.stem}{PLTE_SUFFIX}",
        folder / f"{src_path.stem}{TRNS_SUFFIX}",
    )


def _list_images(folder: Path) -> List[Path]:
    files = [
        p for p in folder.iterdir() if p.is_file() and p.suffix.lower() in IMAGE_EXTENSIONS
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Per-file processing


@dataclass
class ImageAnalysis:
    """
    Outcome of loading one image and choosing its mode.

    Only summary fields are kept; for an indexed mode the PLTE/tRNS payloads
    are encoded up front so the palette itself can be dropped.
    """

    path: Path
    width: int = 0
    height: int = 0
    distinct: int = 0
    grayscale: bool = False
    opaque: bool = False
    indexable: bool = False
    best: Optional[ColorMode] = None
    chosen: Optional[ColorMode] = None
    plte: Optional[bytes] = None
    trns: Optional[bytes] = None
    load_secs: float = 0.0
    palette_secs: float = 0.0
    failure: Optional[str] = None


def _analyse_image(src_path: Path, mode: str) -> ImageAnalysis:
    """
    Load -> palette -> mode, without printing.
    Safe to run on worker threads; failures are kept on the result.
    """
    result = ImageAnalysis(path=src_path)
    t_start = time.perf_counter()
    try:
        rgba = load_rgba(src_path)
        t_loaded = time.perf_counter()
        palette = palette_from_image(rgba)
        t_palette = time.perf_counter()
        result.best = best_mode(palette)
        result.chosen = effective_mode(mode, palette)
        if result.chosen is ColorMode.INDEXED:
            result.plte, result.trns = encode_palette_chunks(palette)
    except (OSError, ValueError, PaletteError) as e:
        result.failure = str(e)
        return result
    result.height, result.width = int(rgba.shape[0]), int(rgba.shape[1])
    result.distinct = palette.size()
    result.grayscale = palette.is_grayscale()
    result.opaque = palette.is_opaque()
    result.indexable = palette.is_indexable()
    result.load_secs = t_loaded - t_start
    result.palette_secs = t_palette - t_loaded
    return result


def _report_image(
    result: ImageAnalysis,
    outdir: Optional[Path],
    write_payloads: bool,
    debug: bool,
) -> bool:
    """
    Print one image's report and write its payloads if asked.
    Returns False if the image could not be handled.
    """
    print_banner(result.path.name)
    best, chosen = result.best, result.chosen
    if result.failure is not None:
        error(f"{result.path.name}: {result.failure}")
        return False
    if best is None or chosen is None:
        error(f"{result.path.name}: no colour mode was chosen")
        return False

    log(
        key_value_pairs_to_string(
            [
                ("Size", f"{result.width}x{result.height}"),
                ("Distinct colours", result.distinct),
            ]
        )
    )
    log(
        key_value_pairs_to_string(
            [
                ("Grayscale", format_yes_no(result.grayscale)),
                ("Opaque", format_yes_no(result.opaque)),
                ("Indexable", format_yes_no(result.indexable)),
            ]
        )
    )
    log(f"Best mode: {best.name.lower()}")
    if chosen is not best:
        log(f"Mode: {chosen.name.lower()} (requested)")
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Channels", channel_count(chosen)),
                    ("Load", format_seconds_compact(result.load_secs)),
                    ("Palette", format_seconds_compact(result.palette_secs)),
                ]
            )
        )

    if not write_payloads:
        return True
    if chosen is not ColorMode.INDEXED:
        warn(f"payloads skipped: mode is {chosen.name.lower()}, not indexed")
        return True

    plte, trns = result.plte, result.trns
    if plte is None:
        error(f"{result.path.name}: no PLTE payload for indexed mode")
        return False
    plte_path, trns_path = _payload_paths(result.path, outdir)
    try:
        plte_path.parent.mkdir(parents=True, exist_ok=True)
        plte_path.write_bytes(plte)
        log(f"Wrote {plte_path.name} ({len(plte):,} bytes)")
        if trns is not None:
            trns_path.write_bytes(trns)
            log(f"Wrote {trns_path.name} ({len(trns):,} bytes)")
    except OSError as e:
        error(f"{result.path.name}: {e}")
        return False
    return True


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Handles single file or folder. In folder mode --jobs analyses files in
    parallel; reports are printed afterwards in file-name order.
    Returns the exit status.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    print_config_line(
        "run",
        [("CPU cores", os.cpu_count() or 1), ("Jobs", args.jobs), ("Mode", args.mode)],
        debug=args.debug,
    )

    src = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    if src.is_dir():
        files = _list_images(src)
        if args.debug:
            debug_log(key_value_pairs_to_string([("Images", len(files)), ("Jobs", args.jobs)]))
        if not files:
            warn(f"no images in {src}")
            return 0
    else:
        files = [src]

    if args.jobs > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=args.jobs) as ex:
            analyses = list(ex.map(lambda p: _analyse_image(p, args.mode), files))
    else:
        analyses = [_analyse_image(p, args.mode) for p in files]

    results = [
        _report_image(a, args.outdir, args.write_payloads, args.debug) for a in analyses
    ]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
