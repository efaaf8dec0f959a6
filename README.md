# ygtools

Building blocks for writing compilers and compiler tools, a few small
front ends built on top of them, and a snapshot test runner.

## What is inside

- `ygtools.color`: wrap text in ANSI escape sequences (`red`, `green`,
  `bold`, `italic`, `underline`, `strike`, `bg_blue`, 24-bit
  `color(text, r, g, b)`, `bg_color(text, r, g, b)`, …) and `encode`, which
  turns markup such as `<blue>hello<bold>world` or `<&ff8800>orange` into
  escape sequences. `encode` raises `ValueError` for a six-character
  `<&...>` tag that is not valid hex.
- `ygtools.pad`: `pad_to_len(text, length)` pads a string with spaces.
- `ygtools.profile`: `ColorProfile` and `ColorClass`, describing how IR
  elements (instructions, types, variables, names, values) are colored.
  `ColorProfile.default()` gives the standard scheme and `markup(text,
  color_class)` applies it; names are also made bold.
- `ygtools.error`: `Error`, a diagnostic with a location, an optional code
  line (`set_code_line`) and `^^^` markers (`add_where`). `str(err)` renders
  it, `err.print()` writes it to stderr.
- `ygtools.cli`: `Cli`, a small parser for `-opt` / `--option` flags and
  `-arg=value` / `--argument=value` arguments with generated help.
- `ygtools.srcmngr`: `SrcMngr` keeps registered source files and a read
  position in each; unknown names raise `UnknownFileError`.
- `ygtools.tokmngr`: `TokenMgr` collects `(token, line, column_range)`
  tuples from a scanning callback until it returns `None`.
- `ygtools.type_switch`: `TypeSwitch`, a lookup from type identifiers to
  values.
- `ygtools.debug`: `DebugLocation`, `DebugVariable`, `DebugRegistry` and the
  `Lang` enumeration of DWARF source-language codes.
- `ygtools.ycc`: the AST (`ygtools.ycc.ast`), diagnostics (`ErrorLoc`,
  `YccError`) and file helpers (`default_out_path`, `read_in_file`,
  `out_file`) of a small C front end.
- `ygtools.simplelang`: the tokenizer (`lex`), `Parser` and `Semantic`
  analysis of a tiny example language.
- `ygtools.ytest`: a snapshot test runner (`parse` for test-case files,
  `run_commands`, and the `ytest` command).

## Install

```
pip install .
```

## Colored text

```python
from ygtools.color import bold, red, encode

print(bold("Usage:"))
print(red("error"))
print(encode("<green>ok <bold>done"))
```

## Command line parsing

```python
from ygtools.cli import Cli

cli = Cli("mytool", "Does things", "1.0", "me")
cli.add_opt("h", "help", "Displays help")
cli.add_arg("in", "input", "The input file", True)
cli.scan(["-in=main.sl"])
print(cli.arg_val("in"))   # main.sl
```

`scan` exits with code -1 on an unknown token or a missing required
argument, and with 0 after printing the help (`--help`) or the version
(`--version`) when such options are registered. Without an argument list it
reads the process arguments.

## The simplelang front end

```python
from ygtools.simplelang.lexer import lex
from ygtools.simplelang.parser import Parser
from ygtools.simplelang.semantic import Semantic

source = "func add(a: i32, b: i32) -> i32 { return a + b; }"
parser = Parser(lex(source))
parser.parse()
sem = Semantic(parser.out)
sem.analyze()
print(parser.had_errors(), sem.had_errors())   # False False
```

`lex` raises `LexingError` at the first character that starts no token.
The parser and the semantic analysis report problems to stderr and record
them; `had_errors()` tells whether any were found.

## Running test cases with `ytest`

A test case file is split into sections by marker lines:

```
# RUN:
cat %s
# IN:
hello world
# STDOUT:
helloworld
# EXIT_CODE=0
```

- Lines before any marker, and lines after `# IN:`, form the input. It is
  written to `./tmp.yl`; lines after `# IN2:` are written to `./tmp2.c`.
- `# RUN:` starts the commands. Each is run through `sh -c` (`cmd /C` on
  Windows) after `%s` is replaced by `./tmp.yl` and `%c` by `./tmp2.c`.
- `# STDOUT:` gives the expected standard output; all whitespace is
  ignored when comparing. Lines under `# STDERR:` are collected into the
  expected standard output as well.
- `# EXIT_CODE=<n>` gives the expected exit code, and `# EXPECT_FAIL`
  marks a case whose commands are expected to fail.

Run a case with:

```
ytest -t=case.test
```

Options: `-h`/`--help`, `-v`/`--version`, and `-no-exit`/`--no-exit-on-error`
to keep going after most failures. `-neg-exit`/`--exit-code-neg` is
accepted but does not change what the runner does. On a failure the
command exits with code -1.

## What this package does not do

There is no IR, optimizer, code generator, assembler or object-file
writer here. The simplelang front end stops after semantic analysis and
has no command of its own; the C front end consists only of its AST,
diagnostics and file helpers, with no tokenizer, parser or command.