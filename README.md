# loxinterp

loxinterp is a tree-walking interpreter for a small, dynamically typed
scripting language in the Lox family. It supports variables, nested block
scopes, `if`/`else`, `while` and `for` loops, the logical operators
`and`/`or`, arithmetic, comparison, string concatenation and `print`.

## Installation

```
pip install .
```

## Running scripts

Run a script file:

```
loxinterp script.lox
```

Start the interactive shell by running the command with no arguments:

```
loxinterp
```

The shell prints a banner and then a `> ` prompt. Type one statement per line.
If a line contains no `;`, one is added at its end. An empty line, the end of
input or `.exit` leaves the shell. Variables keep their values from one line
to the next.

Exit statuses of the command:

- 64: more than one argument was given; `Usage: loxinterp [script]` is printed.
- 65: the script has a syntax error.
- 75: the script failed at run time.
- 1: the script file could not be opened.
- 0: otherwise.

Syntax errors are written to standard error as
`[line N] Error at 'lexeme': message` (or `at end` at the end of input).
A runtime error stops the program and writes the message followed by
`[line N]` to standard output.

## The language

```
var greeting = "hello";
print greeting + " world";

for (var i = 0; i < 3; i = i + 1) {
    print i;
}

var n = 10;
while (n > 0 and n != 5) n = n - 1;
print n;
```

Points worth knowing:

- `print` writes a number with two decimal places, so `print 1;` outputs
  `1.00`. `nil`, `true` and `false` print as themselves; strings print as-is.
- `string + number` appends the number with six decimal places
  (`"a" + 1` is `"a1.000000"`). `number + string` is a runtime error.
- A string and a number compare equal with `==` when the string is the
  number written with six decimal places.
- Dividing by zero is a runtime error.
- `+` and `-` group to the right, so `1 - 2 - 3` is `1 - (2 - 3)`.
- Unary `-` checks that its operand is a number but returns it unchanged.
- A comma separates expressions; the value is that of the last one.
- `nil` and `false` are falsy; every other value is truthy.
- Identifiers are made of ASCII letters only. Strings have no escape
  sequences. Comments are `// ...` to the end of the line and `/* ... */`.

## What it does not do

The language has no functions, classes or `return`. The words `fun`,
`class`, `return`, `this` and `super` are reserved keywords but no statement
uses them, so code containing them is rejected with a syntax error.

## Using it from Python

```python
from loxinterp.lox import Lox

lox = Lox()
lox.run("var a = 1; print a + 2;")   # prints 3.00
```

`Lox` accepts optional `stdin`, `out` and `err` streams and also provides
`run_file(path)` and `run_prompt()`. `loxinterp.lox.main(argv)` is the command
entry point and returns the exit status.

The stages can be used on their own:

- `loxinterp.scanner.Scanner(source).scan_tokens()` returns a list of
  `loxinterp.tokens.Token`, ending with an `EOF` token.
- `loxinterp.parser.Parser(tokens).parse()` returns a list of statements from
  `loxinterp.syntax`; a declaration that failed to parse becomes `None`.
- `loxinterp.interpreter.Interpreter().interpret(statements)` executes them.
  The module also offers `is_truthy`, `is_equal` and `stringify`.
- `loxinterp.ast_printer.AstPrinter().stringify(stmt)` renders a statement
  tree as text; `print(stmt)` writes it out.
- `loxinterp.errors.ErrorReporter` prints errors and records them in
  `had_error` and `had_runtime_error`; `LoxRuntimeError` and `ParseError`
  are the exception types.
- `loxinterp.environment.Environment` holds variable scopes.

## Running the tests

```
pip install .[test]
pytest
```