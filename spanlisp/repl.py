"""Console read-eval-print loop.

`step1` reads and pretty-prints; `step2` reads, evaluates and prints.
Both read stdin line by line, prompt and answer on stdout, and exit with 0 at
end of input or 1 if reading or writing fails.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from spanlisp import config
from spanlisp.interpreter import Interpreter, ReadPrintInterpreter

logger = logging.getLogger(__name__)


def run(
    interp: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    prompt: str = config.PROMPT,
) -> int:
    """Drive `interp` until end of input. Returns the process exit code."""
    try:
        while True:
            stdout.write(prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                return 0
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            stdout.write(interp.rep(line))
    except (OSError, UnicodeError) as e:
        logger.debug("I/O failure", exc_info=True)
        try:
            stderr.write(f"{e}\n")
            stderr.flush()
        except OSError:
            pass
        return 1


def _configure_logging() -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def step1() -> int:
    _configure_logging()
    return run(ReadPrintInterpreter(), sys.stdin, sys.stdout, sys.stderr)


def step2() -> int:
    _configure_logging()
    return run(Interpreter(), sys.stdin, sys.stdout, sys.stderr)


def step1_main() -> None:
    sys.exit(step1())


def step2_main() -> None:
    sys.exit(step2())


if __name__ == "__main__":
    step2_main()
