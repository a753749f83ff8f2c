"""
Interactive question shell.

A ``cmd.Cmd`` loop exposing one command, ``q "<question>"``, plus ``help``
and ``exit``. Each command blocks until the answer arrives. A failed
question is reported and the shell keeps accepting input.

Dependencies: cmd, shlex, docqa.core.rag_query
System role: Command-line interface
"""

import cmd
import logging
import shlex
from typing import IO, Protocol

from docqa.core.exceptions import DocQAException
from docqa.observability.correlation import correlation_scope
from docqa.observability.log_utils import log_exception_with_context, safe_log_value

logger = logging.getLogger(__name__)

USAGE = 'Usage: q "<question>"'


class QuestionAnswerer(Protocol):
    def ask(self, question: str) -> str: ...


def parse_question(arg: str) -> str:
    """
    Turn the argument of the q command into a question.

    Quoted and unquoted forms are both accepted: ``q "what is x"`` and
    ``q what is x`` give the same question. Unbalanced quotes fall back to
    the raw text.

    Args:
        arg: Text after the command name

    Returns:
        str: Question text, empty when nothing was given
    """
    try:
        parts = shlex.split(arg)
    except ValueError:
        return arg.strip()
    return " ".join(parts).strip()


class DocQAShell(cmd.Cmd):
    """Shell answering questions about the reference document."""

    intro = (
        "Ask questions about the reference document.\n"
        f"{USAGE}    Type 'help' for commands, 'exit' to quit."
    )
    prompt = "docqa:> "

    def __init__(
        self,
        answerer: QuestionAnswerer,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        if stdin is not None:
            # cmd only reads from a custom stdin when raw input is disabled
            self.use_rawinput = False
        self._answerer = answerer

    def _print(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def do_q(self, arg: str) -> bool:
        """q "<question>" -- ask a question about the reference document."""
        question = parse_question(arg)
        if not question:
            self._print(USAGE)
            return False

        with correlation_scope():
            logger.info(f"{__name__}:do_q - question={safe_log_value(question)}")
            try:
                answer = self._answerer.ask(question)
            except DocQAException as e:
                log_exception_with_context(logger, "Question failed", e)
                self._print(f"Error: {e.message}")
                return False

        self._print(answer)
        return False

    def do_exit(self, arg: str) -> bool:
        """exit -- leave the shell."""
        return True

    do_quit = do_exit

    def do_EOF(self, arg: str) -> bool:
        """Leave the shell on end of input (Ctrl-D)."""
        self._print("")
        return True

    def emptyline(self) -> bool:
        # Default behaviour repeats the previous command
        return False

    def default(self, line: str) -> bool:
        self._print(f"Unknown command: {line.split()[0]}. {USAGE}")
        return False
