# exprasm

`exprasm` compiles simple arithmetic assignment statements such as

```
y = (2*x*y)/(x+y)
```

into three-address code (TAC) and then into 32-bit x86 assembly in NASM
syntax for Linux.

## Stages

1. **Lexing** (`exprasm.lexer.tokenize`) turns source text into `Token`s
   whose `type` is a `TokenType`. Runs of ASCII digits become `NUMBER`,
   runs of ASCII letters become `VARIABLE`. The operators `+ - * / ^` become
   `OPERATOR`, `=` becomes `ASSIGN`, and parentheses become `LPAREN` and
   `RPAREN`. Whitespace and any other character are skipped. The list
   always ends with an `END` token.
2. **Parsing** (`exprasm.parser.parse`) builds a binary tree of `Node`s
   with the shunting-yard algorithm. It returns `None` when there are no
   operands. It raises `ParseError` when an operator lacks an operand or
   a `(` is never closed. `precedence` ranks `^` (4) above `*` and `/` (3)
   and above `+` and `-` (2). Everything else, `=` included, ranks 0.
   `^` is right-associative, as reported by `is_right_associative`.
3. **Semantic checks** (`exprasm.semantic`):
   - `collect_declared_variables` returns the names of all variable
     leaves.
   - `check_semantic_errors` raises `SemanticError` on division by the
     literal `0`. It also raises it for a variable that is not in the
     given set.
   - `semantic_check` runs both. It counts every variable in the tree as
     declared, so in practice only division by zero is rejected.
4. **Intermediate code** (`exprasm.icg.generate_3ac`) produces TAC lines
   such as `t1 = x + y`. Temporaries are named `t1`, `t2` and so on. The
   pattern `(2*x*y)/(x+y)` becomes the single instruction `TAYLOR x y`,
   whether written `2*(x*y)` or `(2*x)*y`, and with `x+y` or `y+x` below.
   An assignment always stores its value into `y`.
5. **Code generation** (`exprasm.codegen.generate_assembly`) returns the
   program as a string:
   - a `.data` section that holds `x`, `t1` and every other name found in
     the TAC, as zero-initialised `dd` words;
   - a `.text` section with a `_pow` routine (`eax = eax ^ ecx`) and a
     `TAYLOR` routine (`eax = 2*eax*ebx / (eax+ebx)`);
   - one commented block per TAC line;
   - a final Linux `exit` system call.

   `write_assembly` writes the same text to an open text stream.

## Installation

```
pip install .
```

The package uses only the Python standard library and supports
Python 3.10 and later.

## Command line

```
exprasm [INPUT] [-o OUTPUT]
```

`INPUT` defaults to `input.txt` and `OUTPUT` defaults to `output.asm`.
The command first reads the input file and lists the tokens, each with its
numeric type. It then prints the three-address code and writes the
assembly to the output file. It exits with status 0 on success. It exits
with status 1, and a message on standard error, if the input cannot be
read or parsing fails. The same happens on a semantic error, when no
intermediate code results, or when the output cannot be written.

## Library use

```python
from exprasm.lexer import tokenize
from exprasm.parser import parse
from exprasm.semantic import semantic_check
from exprasm.icg import generate_3ac
from exprasm.codegen import generate_assembly

tree = parse(tokenize("y = (2*x*y)/(x+y)"))
semantic_check(tree)
tac = generate_3ac(tree)
print(tac)            # ['t1 = TAYLOR x y', 'y = t1']
print(generate_assembly(tac))
```

`exprasm.cli.compile_source(code)` runs the whole pipeline on a string
and returns `(tokens, tac, assembly)`. It raises `CompileError` when
parsing fails or no intermediate code results. It raises `SemanticError`
when a semantic check fails.

## What it does not do

- `exprasm` only produces NASM source text. It does not assemble, link
  or run the generated program.
- It has no unary operators and no function calls.
- It does not report syntax errors beyond the parser cases listed above.
  Unknown characters are silently skipped.

## Development

```
pip install -e ".[test]"
pytest
```