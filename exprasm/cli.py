"""Command-line driver running the whole compilation pipeline."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .codegen import generate_assembly
from .icg import generate_3ac
from .lexer import Token, tokenize
from .parser import ParseError, parse
from .semantic import SemanticError, semantic_check


class CompileError(Exception):
    """Raised when a compilation stage produces no usable result."""


def compile_source(code: str) -> tuple[list[Token], list[str], str]:
    """Compile ``code`` and return ``(tokens, three_address_code, assembly)``.

    Raises :class:`CompileError` if parsing fails or no intermediate code
    results, and :class:`SemanticError` if a semantic check fails.
    """
    tokens = tokenize(code)
    try:
        ast = parse(tokens)
    except ParseError as exc:
        raise CompileError(f"Parser failed: {exc}") from exc
    if ast is None:
        raise CompileError("Parser failed")

    semantic_check(ast)

    tac = generate_3ac(ast)
    if not tac:
        raise CompileError("No intermediate code generated")

    return tokens, tac, generate_assembly(tac)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprasm",
        description="Compile an arithmetic expression into x86 assembly.",
    )
    parser.add_argument(
        "input", nargs="?", default="input.txt", help="source file (default: input.txt)"
    )
    parser.add_argument(
        "-o",
        "--output",
        default="output.asm",
        help="assembly output file (default: output.asm)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the compiler; return 0 on success and 1 on any error."""
    args = _build_arg_parser().parse_args(argv)
    input_path = Path(args.input)
    output_path = Path(args.output)

    try:
        code = input_path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        print(f"Error: Cannot open {input_path.name}", file=sys.stderr)
        return 1
    print("Input file read successfully.")

    try:
        tokens, tac, assembly = compile_source(code)
    except SemanticError as exc:
        print(f"Semantic Error: {exc}", file=sys.stderr)
        return 1
    except CompileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Tokens ({len(tokens)}) :")
    for token in tokens:
        print(f"Type : {int(token.type)}, Value : {token.value}")
    print(f"Lexical analysis completed. Tokens: {len(tokens)}")
    print("Parsing successful.")
    print("Semantic analysis passed.")
    for line in tac:
        print(line)
    print("3-address code (TAC) generation completed.")

    try:
        output_path.write_text(assembly, encoding="utf-8")
    except OSError:
        print(f"Error: Cannot create {output_path.name}", file=sys.stderr)
        return 1
    print(f"Assembly code written to {output_path.name}")

    if not output_path.exists():
        print("Error: Output file not found", file=sys.stderr)
        return 1

    print(f"Successfully created {output_path.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())