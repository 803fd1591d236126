"""x86 (NASM, 32-bit Linux) assembly generation from three-address code."""

from __future__ import annotations

import string
from typing import Iterable, Iterator, TextIO

_NON_VARIABLES = frozenset({"=", "+", "-", "*", "/", "^", "TAYLOR"})
_PREDECLARED = ("x", "t1")

_DATA_HEADER = (
    "section .data\n"
    "global x, t1\n"
    "x: dd 0\n"
    "t1: dd 0\n"
)

_TEXT_HEADER = (
    "\nsection .text\n"
    "global _start\n\n"
    "_start:\n"
)

# eax = eax ^ ecx
_POW_ROUTINE = (
    "\n_pow:\n"
    "    push ebx\n"
    "    mov ebx, eax\n"
    "    mov eax, 1\n"
    "    cmp ecx, 0\n"
    "    je .pow_end\n"
    ".pow_loop:\n"
    "    imul eax, ebx\n"
    "    dec ecx\n"
    "    jnz .pow_loop\n"
    ".pow_end:\n"
    "    pop ebx\n"
    "    ret\n\n"
)

# eax = (2 * eax * ebx) / (eax + ebx)
_TAYLOR_ROUTINE = (
    "TAYLOR:\n"
    "    push ecx\n"
    "    push edx\n"
    "    mov ecx, eax\n"
    "    imul eax, ebx\n"
    "    add eax, eax\n"
    "    add ecx, ebx\n"
    "    cdq\n"
    "    idiv ecx\n"
    "    pop edx\n"
    "    pop ecx\n"
    "    ret\n\n"
)

_EXIT = (
    "    mov eax, 1\n"
    "    xor ebx, ebx\n"
    "    int 0x80\n"
)

_SIMPLE_OPS = {"+": "add", "-": "sub", "*": "imul"}


def _is_number(token: str) -> bool:
    return token[:1] in string.digits and token != ""


def _operand(token: str) -> str:
    return token if _is_number(token) else f"[{token}]"


def _variables(tac: Iterable[str]) -> list[str]:
    names = {
        part
        for line in tac
        for part in line.split()
        if not _is_number(part) and part not in _NON_VARIABLES
    }
    return sorted(names)


def _translate(line: str) -> Iterator[str]:
    fields = line.split()
    dest = fields[0] if fields else ""
    parts = fields[2:]

    yield f"    ; {line}\n"

    if len(parts) == 3 and parts[0] == "TAYLOR":
        yield f"    mov eax, {_operand(parts[1])}\n"
        yield f"    mov ebx, {_operand(parts[2])}\n"
        yield "    call TAYLOR\n"
    elif len(parts) == 3:
        src1, op, src2 = parts
        first, second = _operand(src1), _operand(src2)
        if op in _SIMPLE_OPS:
            yield f"    mov eax, {first}\n"
            yield f"    {_SIMPLE_OPS[op]} eax, {second}\n"
        elif op == "/":
            yield f"    mov eax, {first}\n"
            yield "    cdq\n"
            yield f"    mov ebx, {second}\n"
            yield "    idiv ebx\n"
        elif op == "^":
            yield f"    mov eax, {first}\n"
            yield f"    mov ecx, {second}\n"
            yield "    call _pow\n"

    yield f"    mov [{dest}], eax\n\n"


def _chunks(tac: list[str]) -> Iterator[str]:
    yield _DATA_HEADER
    for name in _variables(tac):
        if name not in _PREDECLARED:
            yield f"{name}: dd 0\n"
    yield _TEXT_HEADER
    yield _POW_ROUTINE
    yield _TAYLOR_ROUTINE
    for line in tac:
        yield from _translate(line)
    yield _EXIT


def generate_assembly(tac: Iterable[str]) -> str:
    """Return the assembly program for the given three-address code lines."""
    return "".join(_chunks(list(tac)))


def write_assembly(tac: Iterable[str], out: TextIO) -> None:
    """Write the assembly program for ``tac`` to the text stream ``out``."""
    out.write(generate_assembly(tac))