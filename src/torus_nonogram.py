#!/usr/bin/env python3
"""CLI entry point for the toroidal nonogram.

Two sources for the solution:
  1. File mode (default): read a text (or .xlsx) puzzle description
  2. Generate mode (--generate): random grid of --rows x --cols

The puzzle is then played in the terminal, or with --export written out as
PDF, hint XLSX, puzzle SVG and answer SVG.
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from models import Mark, PuzzleError


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Play or print a wrap-around nonogram puzzle."
    )
    p.add_argument("input", nargs="?", default=None,
                   help="Puzzle file (text format or .xlsx); not needed with --generate")
    p.add_argument("--generate", action="store_true",
                   help="Generate a random solution grid instead of reading a file")
    p.add_argument("--rows", type=int, default=10,
                   help="Rows for --generate (default: 10)")
    p.add_argument("--cols", type=int, default=10,
                   help="Columns for --generate (default: 10)")
    p.add_argument("--density", type=float, default=0.5,
                   help="Fraction of filled cells for --generate (default: 0.5)")
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed for generation, hint rotation and cursor (default: random)")
    p.add_argument("--export", metavar="OUTPUT", default=None,
                   help="Write PDF/XLSX/SVG files next to OUTPUT instead of playing")
    p.add_argument("--save", metavar="PATH", default=None,
                   help="Also write the solution in text puzzle format")
    p.add_argument("--title", default="TORUS NONOGRAM",
                   help='Title text for exports (default: "TORUS NONOGRAM")')
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if not args.generate and args.input is None:
        parser.error("input puzzle file is required (or use --generate)")

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    rng = random.Random(seed)

    try:
        solution = _load_or_generate(args, rng)

        if args.save:
            from puzzle_file import write_puzzle
            write_puzzle(solution, args.save)
            print(f"Output: {args.save}", file=sys.stderr)

        from engine import PuzzleEngine
        engine = PuzzleEngine.build(solution, rng)
        filled = sum(row.count(Mark.FILLED) for row in engine.solution)
        print(
            f"Puzzle {engine.size.rows}x{engine.size.cols}, "
            f"{filled} filled cells (seed={seed})",
            file=sys.stderr,
        )

        if args.export:
            _output_all(engine, args.title, args.export)
        else:
            from controller import CursorController
            from terminal_ui import play
            controller = CursorController(engine, rng)
            play(controller)
            if controller.is_solved():
                print("Solved!", file=sys.stderr)

    except PuzzleError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _load_or_generate(args, rng: random.Random):
    if args.generate:
        from solution_generator import generate_solution
        print(
            f"Generating {args.rows}x{args.cols} puzzle "
            f"(density={args.density})...",
            file=sys.stderr,
        )
        return generate_solution(args.rows, args.cols, args.density, rng)

    from puzzle_file import load_solution
    return load_solution(args.input)


def _output_all(engine, title: str, output_path: str) -> None:
    """Generate all output files in an 'output' folder: PDF, XLSX, puzzle SVG, answer SVG."""
    from pdf_renderer import render_pdf
    from xlsx_writer import write_hints_xlsx
    from svg_renderer import render_puzzle_svg, render_answer_svg

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_hints.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(engine, title, pdf_path)
    write_hints_xlsx(engine, xlsx_path, include_solution=True)
    render_puzzle_svg(engine, puzzle_svg_path)
    render_answer_svg(engine, answer_svg_path)

    print(f"Output: {pdf_path}", file=sys.stderr)
    print(f"Output: {xlsx_path}", file=sys.stderr)
    print(f"Output: {puzzle_svg_path}", file=sys.stderr)
    print(f"Output: {answer_svg_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
