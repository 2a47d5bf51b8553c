"""Interactive terminal loop: read a line, ask Gemini, print the answer.

Usage:
    gemini-chat                       # uses GEMINI_API_KEY
    gemini-chat --model gemini-1.5-flash --timeout 30
"""
from __future__ import annotations
import argparse
import io
import logging
import sys
from typing import Callable, TextIO

from gemini_chat.client.credentials import CredentialError, load_api_key
from gemini_chat.client.exchanger import ERROR_SENTINEL, GeminiExchanger
from gemini_chat.common.config import DEFAULT_CFG_PATH, ConfigError, load_config
from gemini_chat.common.logging_setup import setup_logging

LOGGER = logging.getLogger("gemini_chat.client.repl")

PROMPT = "Enter your question (or 'exit' to quit): "
EXIT_COMMAND = "exit"
ANSWER_LABEL = "Response from GEMINI: "

def _read_line(stdin: TextIO, stdout: TextIO, prompt: str) -> str | None:
    """Return the next line without its newline, or None at end of input."""
    if prompt:
        stdout.write(prompt)
        stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line

def run_loop(
    ask: Callable[[str], str],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    interactive: bool | None = None,
) -> int:
    """
    Run the read/ask/print loop until ``exit`` or end of input.

    Args:
        ask: Maps user text to an answer or ``ERROR_SENTINEL``.
        stdin: Input stream; defaults to ``sys.stdin``.
        stdout: Answer stream; defaults to ``sys.stdout``.
        interactive: Show the input prompt. Defaults to ``stdin.isatty()``.

    Returns:
        Process exit status (always 0).
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    if interactive is None:
        interactive = stdin.isatty()
    prompt = PROMPT if interactive else ""

    try:
        while True:
            try:
                line = _read_line(stdin, stdout, prompt)
            except UnicodeDecodeError as e:
                LOGGER.error("Could not decode input line: %s", e)
                continue
            # Exact match only: "Exit" or " exit" go to the API like any other text.
            if line is None or line == EXIT_COMMAND:
                break

            answer = ask(line)
            if answer and answer != ERROR_SENTINEL:
                print(f"{ANSWER_LABEL}{answer}", file=stdout, flush=True)
            else:
                LOGGER.error("No valid response received from the API.")
    except KeyboardInterrupt:
        pass
    return 0

def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Chat with Gemini from the terminal")
    ap.add_argument("--cfg", default=None, help=f"Config path (default: {DEFAULT_CFG_PATH} if present)")
    ap.add_argument("--model", default=None, help="Gemini model id")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    setup_logging(getattr(logging, args.log_level))
    try:
        cfg = load_config(args.cfg, overrides={"model": args.model, "timeout": args.timeout})
    except ConfigError as e:
        ap.error(str(e))

    try:
        api_key = load_api_key(cfg.api_key_env)
    except CredentialError as e:
        LOGGER.error("%s", e)
        return 1

    if isinstance(sys.stdin, io.TextIOWrapper):
        # Undecodable bytes become U+FFFD instead of aborting the read.
        sys.stdin.reconfigure(errors="replace")

    LOGGER.debug("Using model %s (timeout %ss)", cfg.model, cfg.timeout)
    with GeminiExchanger(api_key, cfg) as exchanger:
        return run_loop(exchanger.ask)

if __name__ == "__main__":
    sys.exit(main())
