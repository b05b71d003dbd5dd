"""
strkit Interactive Harness.

Evaluates string operations against a working subject string and prints
each result, or the kind and message of the error it raised.

Usage:
    strkit repl
    strkit eval "hello world" 'slice(-5)' 'indexOf("o")'

Example session:
    >>> :str hello world
    Working on string "hello world"

    >>> slice(-5)
    slice(-5): 'world'

    >>> indexOf(anyOf("aeiou"))
    indexOf(anyOf("aeiou")): 1

    >>> caseInsensitive().startsWith("HELLO")
    caseInsensitive().startsWith("HELLO"): True

    >>> slice(20)
    slice(20):
    RangeError: [offset] Offset must be in range [-len, len]

Expressions are operation calls whose arguments are Python literals or
``anyOf(...)`` / ``noneOf(...)`` queries. Calls may be chained onto a
previous result, e.g. ``trim().toUpper()``. Nothing else is evaluated.
"""

from __future__ import annotations

import ast
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

try:
    import readline

    HAS_READLINE = True
except ImportError:
    # readline not available on some platforms (e.g., Windows without pyreadline)
    HAS_READLINE = False

from strkit import __version__
from strkit.runtime.case_insensitive import CaseInsensitiveView
from strkit.runtime.ops import PUBLIC_NAMES, QueryDispatchOps, resolve_operation
from strkit.runtime.queries import any_of, none_of
from strkit.utils.errors import ExpressionError, StrKitError, UnknownOperationError

logger = logging.getLogger(__name__)


# =============================================================================
# ANSI Color Codes
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors."""
        for attr in ["RED", "GREEN", "YELLOW", "CYAN", "GRAY", "BOLD", "DIM", "RESET"]:
            setattr(cls, attr, "")


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


# =============================================================================
# Expression Evaluation
# =============================================================================


QUERY_FACTORIES: dict[str, Callable[[Any], Any]] = {
    "anyOf": any_of,
    "any_of": any_of,
    "noneOf": none_of,
    "none_of": none_of,
}


class ExpressionEvaluator:
    """
    Evaluates operation-call expressions against a subject string.

    The expression is parsed with ``ast`` and only the supported node shapes
    are interpreted; arbitrary Python is rejected with ``ExpressionError``.
    """

    def __init__(self, ops: QueryDispatchOps) -> None:
        self.ops = ops

    def evaluate(self, expression: str, subject: str) -> Any:
        try:
            tree = ast.parse(expression.strip(), mode="eval")
        except SyntaxError as e:
            raise ExpressionError(f"invalid syntax: {e.msg}") from None

        return self._eval_call(tree.body, subject)

    def _eval_call(self, node: ast.expr, subject: str) -> Any:
        if not isinstance(node, ast.Call):
            raise ExpressionError("expected an operation call such as indexOf(\"x\")")

        args = [self._eval_argument(arg) for arg in node.args]
        kwargs = {kw.arg: self._eval_argument(kw.value) for kw in node.keywords if kw.arg}

        if isinstance(node.func, ast.Name):
            return self._apply(subject, node.func.id, args, kwargs)

        if isinstance(node.func, ast.Attribute):
            target = self._eval_call(node.func.value, subject)
            return self._apply(target, node.func.attr, args, kwargs)

        raise ExpressionError("expected an operation name before '('")

    def _apply(self, target: Any, name: str, args: list[Any], kwargs: dict[str, Any]) -> Any:
        operation = resolve_operation(name)

        if isinstance(target, str):
            return getattr(self.ops, operation)(target, *args, **kwargs)

        if isinstance(target, CaseInsensitiveView) and hasattr(target, operation):
            return getattr(target, operation)(*args, **kwargs)

        raise UnknownOperationError(f"{type(target).__name__}.{name}")

    def _eval_argument(self, node: ast.expr) -> Any:
        if (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id in QUERY_FACTORIES
        ):
            if len(node.args) != 1 or node.keywords:
                raise ExpressionError(f"{node.func.id}() takes exactly one argument")
            return QUERY_FACTORIES[node.func.id](self._literal(node.args[0]))

        return self._literal(node)

    def _literal(self, node: ast.expr) -> Any:
        try:
            return ast.literal_eval(node)
        except ValueError:
            raise ExpressionError(
                f"unsupported argument '{ast.unparse(node)}' (only literals and anyOf/noneOf)"
            ) from None


# =============================================================================
# Evaluation Results
# =============================================================================


@dataclass
class Evaluation:
    """Outcome of evaluating one expression."""

    expression: str
    value: Any = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> str:
        if self.error is None:
            return ""
        if isinstance(self.error, StrKitError):
            return self.error.kind
        return type(self.error).__name__

    def format(self) -> str:
        """Render as ``expr: value`` or ``expr:`` followed by the error line."""
        if self.error is not None:
            return (
                f"{self.expression}:\n"
                f"{Colors.RED}{self.error_kind}: {self.error}{Colors.RESET}"
            )

        separator = "\n" if len(self.expression) > 50 else " "
        return f"{self.expression}:{separator}{format_value(self.value)}"


def format_value(value: Any) -> str:
    """Format an operation result for display."""
    if isinstance(value, CaseInsensitiveView):
        return f"{Colors.CYAN}{value!r}{Colors.RESET}"
    return repr(value)


# =============================================================================
# REPL Commands
# =============================================================================


@dataclass
class REPLCommand:
    """A REPL command definition."""

    name: str
    aliases: tuple[str, ...] = ()
    help_text: str = ""
    handler: Optional[Callable[["StringSession", str], Optional[str]]] = None


# =============================================================================
# String Session
# =============================================================================


class StringSession:
    """
    Interactive session working on one subject string.

    Holds the subject, the evaluation history and the operation set used to
    evaluate expressions. All state lives on the session object.
    """

    def __init__(self, subject: str = "", ops: Optional[QueryDispatchOps] = None) -> None:
        """Initialize a new session."""
        self.subject = subject
        self.ops = ops if ops is not None else QueryDispatchOps()
        self.history: list[str] = []
        self.evaluations: list[Evaluation] = []

        self._evaluator = ExpressionEvaluator(self.ops)
        self._commands = self._setup_commands()

        # Session configuration
        self.prompt = ">>> "
        self.history_file = Path.home() / ".strkit_history"

    def _setup_commands(self) -> dict[str, REPLCommand]:
        """Setup REPL commands."""
        commands = {
            "help": REPLCommand(
                name="help",
                aliases=("h", "?"),
                help_text="Show this help message",
                handler=self._cmd_help,
            ),
            "quit": REPLCommand(
                name="quit",
                aliases=("q", "exit"),
                help_text="Exit the REPL",
                handler=self._cmd_quit,
            ),
            "str": REPLCommand(
                name="str",
                aliases=("s", "subject"),
                help_text="Set the working string",
                handler=self._cmd_str,
            ),
            "ops": REPLCommand(
                name="ops",
                aliases=("o", "operations"),
                help_text="List available operations",
                handler=self._cmd_ops,
            ),
            "history": REPLCommand(
                name="history",
                aliases=("hist",),
                help_text="Show evaluated expressions",
                handler=self._cmd_history,
            ),
            "reset": REPLCommand(
                name="reset",
                aliases=(),
                help_text="Reset the session (clear all state)",
                handler=self._cmd_reset,
            ),
        }

        # Build alias lookup
        alias_map = {}
        for cmd in commands.values():
            alias_map[cmd.name] = cmd
            for alias in cmd.aliases:
                alias_map[alias] = cmd

        return alias_map

    # -------------------------------------------------------------------------
    # Command Handlers
    # -------------------------------------------------------------------------

    def _cmd_help(self, session: "StringSession", args: str) -> str:
        """Show help message."""
        lines = [
            f"{Colors.BOLD}Commands:{Colors.RESET}",
            f"  {Colors.CYAN}:str <text>{Colors.RESET}    Set the working string (quotes optional)",
            f"  {Colors.CYAN}:ops{Colors.RESET}           List available operations",
            f"  {Colors.CYAN}:history{Colors.RESET}       Show evaluated expressions",
            f"  {Colors.CYAN}:reset{Colors.RESET}         Reset the session",
            f"  {Colors.CYAN}:help{Colors.RESET}          Show this help",
            f"  {Colors.CYAN}:quit, :q{Colors.RESET}      Exit REPL",
            "",
            f"{Colors.BOLD}Expressions:{Colors.RESET}",
            f"  {Colors.GREEN}slice(-5){Colors.RESET}                          Negative offsets count from the end",
            f"  {Colors.GREEN}replace({{\"a\": \"b\"}}, 2){Colors.RESET}             Bounded multi-pattern replace",
            f"  {Colors.GREEN}indexOf(anyOf(\"0123456789\")){Colors.RESET}      Query instead of a needle",
            f"  {Colors.GREEN}caseInsensitive().contains(\"HeLLo\"){Colors.RESET}  Case-insensitive view",
        ]
        return "\n".join(lines)

    def _cmd_quit(self, session: "StringSession", args: str) -> str:
        """Exit the REPL."""
        print(f"{Colors.DIM}Goodbye!{Colors.RESET}")
        sys.exit(0)

    def _cmd_str(self, session: "StringSession", args: str) -> str:
        """Set the working string."""
        text = args.strip()
        if text[:1] in ("'", '"'):
            try:
                text = ast.literal_eval(text)
            except (ValueError, SyntaxError):
                return f"{Colors.RED}Error: invalid string literal {text}{Colors.RESET}"
            if not isinstance(text, str):
                return f"{Colors.RED}Error: :str expects a string literal{Colors.RESET}"

        self.set_subject(text)
        return f'Working on string "{self.subject}"'

    def _cmd_ops(self, session: "StringSession", args: str) -> str:
        """List available operations."""
        return "\n".join(f"  {Colors.GREEN}{name}{Colors.RESET}" for name in PUBLIC_NAMES)

    def _cmd_history(self, session: "StringSession", args: str) -> str:
        """Show evaluated expressions."""
        if not self.evaluations:
            return f"{Colors.DIM}No expressions evaluated{Colors.RESET}"

        lines = []
        for i, evaluation in enumerate(self.evaluations, 1):
            status = f"{Colors.GREEN}ok{Colors.RESET}" if evaluation.ok else (
                f"{Colors.RED}{evaluation.error_kind}{Colors.RESET}"
            )
            lines.append(f"  {i:3d}  {evaluation.expression}  [{status}]")
        return "\n".join(lines)

    def _cmd_reset(self, session: "StringSession", args: str) -> str:
        """Reset the entire session."""
        prompt, history_file = self.prompt, self.history_file
        self.__init__(ops=self.ops)
        self.prompt, self.history_file = prompt, history_file
        return f"{Colors.GREEN}Session reset{Colors.RESET}"

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------

    def set_subject(self, subject: str) -> None:
        logger.debug("subject set (%d chars)", len(subject))
        self.subject = subject

    def evaluate(self, expression: str) -> Evaluation:
        """
        Evaluate one operation expression against the subject.

        Any failure, library error or not, is captured on the returned
        ``Evaluation`` rather than raised.
        """
        expression = expression.strip()
        try:
            value = self._evaluator.evaluate(expression, self.subject)
            evaluation = Evaluation(expression, value=value)
        except StrKitError as e:
            logger.debug("evaluation of %r failed: %s", expression, e)
            evaluation = Evaluation(expression, error=e)
        except Exception as e:
            logger.debug("evaluation of %r raised %s", expression, type(e).__name__)
            evaluation = Evaluation(expression, error=e)

        self.evaluations.append(evaluation)
        return evaluation

    def eval_line(self, line: str) -> Optional[str]:
        """
        Evaluate a single line of input.

        Returns the result string or None if no output.
        """
        line = line.strip()
        if not line:
            return None

        if line.startswith(":"):
            return self._handle_command(line)

        return self.evaluate(line).format()

    def _handle_command(self, cmd: str) -> str:
        """Handle a REPL command."""
        parts = cmd[1:].split(maxsplit=1)
        command_name = parts[0].lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        if command_name in self._commands:
            cmd_obj = self._commands[command_name]
            if cmd_obj.handler:
                return cmd_obj.handler(self, args) or ""
            return f"{Colors.YELLOW}Command not implemented: {command_name}{Colors.RESET}"

        return f"{Colors.RED}Unknown command: :{command_name}{Colors.RESET}\nType :help for available commands"

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Main REPL loop."""
        print(f"{Colors.BOLD}strkit {__version__}{Colors.RESET} - Interactive Mode")
        print(
            f"Type {Colors.CYAN}:help{Colors.RESET} for help, {Colors.CYAN}:quit{Colors.RESET} to exit"
        )
        print(f'Working on string "{self.subject}"')
        print()

        if HAS_READLINE:
            completer = REPLCompleter(self)
            readline.set_completer(completer.complete)
            readline.set_completer_delims(" ().,")
            readline.parse_and_bind("tab: complete")

            try:
                if self.history_file.exists():
                    readline.read_history_file(str(self.history_file))
            except OSError as e:
                logger.debug("could not read history file: %s", e)

        try:
            while True:
                try:
                    line = input(self.prompt)
                    self.history.append(line)

                    result = self.eval_line(line)
                    if result:
                        print(result)

                except KeyboardInterrupt:
                    print(f"\n{Colors.DIM}Use :quit to exit{Colors.RESET}")
                except EOFError:
                    print(f"\n{Colors.DIM}Goodbye!{Colors.RESET}")
                    break

        finally:
            if HAS_READLINE:
                try:
                    readline.set_history_length(1000)
                    readline.write_history_file(str(self.history_file))
                except OSError as e:
                    logger.debug("could not write history file: %s", e)


# =============================================================================
# Tab Completion
# =============================================================================


class REPLCompleter:
    """Tab completion for the REPL."""

    def __init__(self, session: StringSession) -> None:
        self.session = session
        self.operations = list(PUBLIC_NAMES)
        self.factories = ["anyOf", "noneOf"]
        self.commands = [f":{name}" for name in session._commands]

    def complete(self, text: str, state: int) -> Optional[str]:
        """Get completions for the given text."""
        if state == 0:
            self._completions = self._get_completions(text)
        try:
            return self._completions[state]
        except IndexError:
            return None

    def _get_completions(self, text: str) -> list[str]:
        """Get all completions for the given text prefix."""
        if text.startswith(":"):
            return sorted({c for c in self.commands if c.startswith(text)})

        completions = [name for name in self.operations if name.startswith(text)]
        completions.extend(name for name in self.factories if name.startswith(text))
        return sorted(set(completions))


# =============================================================================
# Entry Point
# =============================================================================


def main() -> int:
    """Entry point for the REPL."""
    session = StringSession()
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
