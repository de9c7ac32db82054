"""CLI entry point for fulcrum."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .classifier.patterns import PatternTableError
from .config import PROFILES, Config, ConfigError
from .inputs import AnalysisRequest, InputError, parse_request

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(message)s",
        level=level,
        stream=sys.stderr,
    )


def _read_source(source: str | None) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.exists():
        raise InputError(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _load_config(args: argparse.Namespace) -> Config:
    overrides = {}
    if getattr(args, "profile", None):
        overrides["profile"] = args.profile
    if getattr(args, "workers", None):
        overrides["workers"] = args.workers
    if args.verbose:
        overrides["verbose"] = True
    path = Path(args.config).expanduser() if getattr(args, "config", None) else None
    return Config.load(overrides, path=path)


def _dump(data: dict) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def _handle_analyze(args: argparse.Namespace, config: Config) -> int:
    """Handle analyze command."""
    from .pipeline import Analyzer
    from .report import render_markdown

    if args.text is not None:
        request = AnalysisRequest(text=args.text)
    elif args.raw:
        request = AnalysisRequest(text=_read_source(args.file))
    else:
        try:
            data = json.loads(_read_source(args.file))
        except json.JSONDecodeError as e:
            raise InputError(f"Request is not valid JSON: {e}") from e
        request = parse_request(data)

    result = Analyzer(config).analyze_request(request)
    if args.format == "markdown":
        print(render_markdown(result))
    else:
        print(_dump(result.to_dict()))
    return 0


def _handle_classify(args: argparse.Namespace, config: Config) -> int:
    """Handle classify command."""
    from .classifier.classifier import PromptClassifier
    from .classifier.patterns import DEFAULT_PATTERNS_FILE, load_pattern_table

    table = load_pattern_table(config.patterns_file or DEFAULT_PATTERNS_FILE)
    classification = PromptClassifier(table).classify(args.text)
    print(_dump(classification.to_dict()))
    return 0


def _handle_batch(args: argparse.Namespace, config: Config) -> int:
    """Handle batch command: JSON Lines in, JSON Lines out."""
    from .pool import analyze_many

    requests = []
    for lineno, line in enumerate(_read_source(args.file).splitlines(), 1):
        if not line.strip():
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise InputError(f"line {lineno}: not valid JSON: {e}") from e
        try:
            requests.append(parse_request(data))
        except InputError as e:
            raise InputError(f"line {lineno}: {e}") from e

    results = analyze_many(requests, workers=config.workers, config=config)
    for result in results:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    logger.info("Analyzed %d request(s)", len(results))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fulcrum",
        description="Classify, decompose and grade prompts",
    )
    subparsers = parser.add_subparsers(dest="command")

    # analyze subcommand
    analyze_parser = subparsers.add_parser("analyze", help="Analyze and grade one prompt")
    analyze_parser.add_argument(
        "file", nargs="?", default=None,
        help="JSON request file, or - for stdin (default: stdin)"
    )
    analyze_parser.add_argument("--text", type=str, default=None, help="Analyze this text directly")
    analyze_parser.add_argument(
        "--raw", action="store_true",
        help="Treat the input as plain prompt text instead of a JSON request"
    )
    analyze_parser.add_argument(
        "--format", choices=("json", "markdown"), default="json",
        help="Output format (default: json)"
    )
    analyze_parser.add_argument("--profile", choices=PROFILES, default=None, help="Grading profile")
    analyze_parser.add_argument("--config", type=str, default=None, help="Path to config.toml")
    analyze_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    # classify subcommand
    classify_parser = subparsers.add_parser("classify", help="Classify prompt type only")
    classify_parser.add_argument("text", type=str, help="Prompt text")
    classify_parser.add_argument("--config", type=str, default=None, help="Path to config.toml")
    classify_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    # batch subcommand
    batch_parser = subparsers.add_parser("batch", help="Analyze a JSON Lines file of requests")
    batch_parser.add_argument("file", type=str, help="JSON Lines file, or - for stdin")
    batch_parser.add_argument("--workers", type=int, default=None, help="Worker threads (default: 2)")
    batch_parser.add_argument("--profile", choices=PROFILES, default=None, help="Grading profile")
    batch_parser.add_argument("--config", type=str, default=None, help="Path to config.toml")
    batch_parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _setup_logging(getattr(args, "verbose", False))

    handlers = {
        "analyze": _handle_analyze,
        "classify": _handle_classify,
        "batch": _handle_batch,
    }
    try:
        config = _load_config(args)
        return handlers[args.command](args, config)
    except (ConfigError, PatternTableError, InputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
