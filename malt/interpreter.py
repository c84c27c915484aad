from __future__ import annotations

import logging
from pathlib import Path

from malt import LispValue
from malt import config
from malt.builtin.env_builtin import register
from malt.errors import MaltError
from malt.evaluation.evaluator import evaluate
from malt.printer import pr_str
from malt.reader.parser import read, read_all
from malt.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Read/eval/print over one persistent top-level environment seeded with
    the builtins. Definitions made by one call are visible to the next.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = register(Environment())
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate every top-level form of `code`, discarding the results."""
        for expr in read_all(code):
            evaluate(expr, self.env)

    def load_file(self, path: Path) -> None:
        logger.debug("loading prelude %s", path)
        self.eval_prelude(path.read_text(encoding="utf-8"))

    def eval(self, code: str) -> LispValue:
        """Read the last top-level form of `code` and evaluate it."""
        return evaluate(read(code), self.env)

    def rep(self, code: str) -> str:
        return pr_str(self.eval(code))


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    interp = Interpreter()
    prelude = config.get_prelude_path()
    if prelude is not None:
        try:
            interp.load_file(prelude)
        except (OSError, MaltError) as e:
            print(f"prelude {prelude}: {e}")
    prompt = config.get_prompt()
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line.strip():
            continue
        try:
            print(interp.rep(line))
        except MaltError as e:
            print(e)


if __name__ == "__main__":
    main()
