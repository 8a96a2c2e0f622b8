"""Runs source text, files and the interactive prompt; the command entry point."""

from __future__ import annotations

import sys
from typing import TextIO

from .errors import ErrorReporter
from .interpreter import Interpreter
from .parser import Parser
from .scanner import Scanner

EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_SOFTWARE = 75
EXIT_NO_INPUT = 1

_BANNER = "-- lox interpreter interactive shell --"


class Lox:
    """An interpreter session whose global state lasts across runs."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._stdin = stdin
        self._out = out
        self.reporter = ErrorReporter(out, err)
        self.interpreter = Interpreter(self.reporter, out)

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self, source: str) -> None:
        """Scan, parse and execute source; static errors stop execution."""
        if self.reporter.had_error:
            raise SystemExit(EXIT_DATA_ERROR)

        tokens = Scanner(source, self.reporter).scan_tokens()
        statements = Parser(tokens, self.reporter).parse()
        if self.reporter.had_error:
            return
        self.interpreter.interpret(statements)

    def run_prompt(self) -> None:
        """Read and run lines until an empty line, end of input or '.exit'."""
        out = self.out
        print(_BANNER, file=out)
        while True:
            out.write("> ")
            out.flush()
            line = self.stdin.readline()
            if line.endswith("\n"):
                line = line[:-1]
            if not line or line == ".exit":
                break
            if ";" not in line:
                line += ";"
            self.run(line)
            self.reporter.had_error = False

    def run_file(self, path: str) -> None:
        """Run a script file; exits with a status code on any error."""
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as handle:
                content = handle.read()
        except OSError:
            raise SystemExit(EXIT_NO_INPUT) from None

        self.run(content)
        if self.reporter.had_error:
            raise SystemExit(EXIT_DATA_ERROR)
        if self.reporter.had_runtime_error:
            raise SystemExit(EXIT_SOFTWARE)


def main(argv: list[str] | None = None) -> int:
    """Run a script given as the only argument, or the prompt with none."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("Usage: loxinterp [script]")
        return EXIT_USAGE

    lox = Lox()
    try:
        if args:
            lox.run_file(args[0])
        else:
            lox.run_prompt()
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())