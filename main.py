#!/usr/bin/env python
"""CLI for the TruthBot fact-checking chat demo."""

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from truthbot.chat import ChatSession, render_message, render_notification
from truthbot.config import create_from_config, get_default_config_path, load_config

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"exit", "quit"})
PROMPT = "> "


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    text: str | None = None
    config: Path
    seed: int | None = None
    no_delay: bool = False
    log: bool = False
    log_dir: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def submit_and_print(session: ChatSession, text: str) -> None:
    """Submit one line and print every turn it produced."""
    before = len(session.conversation)
    notification = await session.submit(text)
    if notification is None:
        return
    for message in session.conversation.messages[before:]:
        if message.analysis is not None:
            print(render_message(message))
    print(render_notification(notification))


def read_line(prompt: str) -> str:
    """Read one line from stdin, letting Ctrl-C interrupt the blocking read.

    The event loop's SIGINT handler only cancels the main task, which cannot
    take effect while the loop thread is blocked in ``input``.
    """
    previous = signal.signal(signal.SIGINT, signal.default_int_handler)
    try:
        return input(prompt)
    finally:
        signal.signal(signal.SIGINT, previous)


async def interactive(session: ChatSession) -> None:
    """Read submissions from stdin until EOF or an exit command."""
    print(render_message(session.conversation.messages[0]))
    print("Paste a news article, URL, or claim to fact-check (type 'exit' to quit).")
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            break
        if line.strip().lower() in EXIT_COMMANDS:
            break
        await submit_and_print(session, line)


async def run(args: CLIArgs) -> None:
    """Run a one-shot or interactive session with the given configuration.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    session, transcript = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir,
        seed_override=args.seed,
        latency_override=0.0 if args.no_delay else None,
        session_type="one_shot" if args.text is not None else "interactive",
    )
    logger.debug(f"Config: {args.config}")

    try:
        if args.text is not None:
            await submit_and_print(session, args.text)
        else:
            await interactive(session)
    finally:
        session.close()

    if transcript and transcript.last_log_path:
        logger.info(f"\nTranscript written to: {transcript.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Check news text or URLs for authenticity.")
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text or URL to analyze once (omit for an interactive chat)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible confidence scores",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        default=False,
        help="Skip the simulated analysis delay",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON transcript of the session",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Directory for transcript files (default: logging.log_dir from config)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            text=ns.text,
            config=config_path,
            seed=ns.seed,
            no_delay=ns.no_delay,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except ValidationError as e:
        logger.error(f"Invalid config {args.config}: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
