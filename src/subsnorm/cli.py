"""Command line interface for subsnorm."""

from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .ass.dialogue import UnparsableLineError, format_dialogue, is_dialogue_line, parse_dialogue
from .ass.writer import ASSWriter
from .config import DEGENERATE_POLICIES, NormalizeConfig, apply_overrides, load_config, validate_config
from .logging import configure_logging, get_logger
from .retime.retimer import DegenerateDurationError, EventRetimer

LOGGER = get_logger("cli")

_RETIMED = "retimed"
_UNPARSED = "unparsed"
_DEGENERATE = "degenerate"


@dataclass(slots=True)
class NormalizeReport:
    """Outcome counters for one processed file."""

    events_in: int = 0
    events_out: int = 0
    unparsed: List[int] = field(default_factory=list)
    degenerate: List[int] = field(default_factory=list)


class NormalizePipeline:
    """Rewrite every dialogue event of a subtitle file."""

    def __init__(self, config: NormalizeConfig) -> None:
        self._config = config
        self._retimer = EventRetimer(config.reading.max_symbols)
        self._writer = ASSWriter(config.processing.output_encoding)

    # ------------------------------------------------------------------
    def _process_dialogue(self, line: str) -> Tuple[str, List[str]]:
        try:
            event = parse_dialogue(line)
        except UnparsableLineError:
            return _UNPARSED, [line]
        try:
            events = self._retimer.retime(event)
        except DegenerateDurationError:
            if self._config.processing.on_degenerate == "skip":
                return _DEGENERATE, []
            return _DEGENERATE, [line]
        return _RETIMED, [format_dialogue(item) for item in events]

    def _process_all(self, dialogue: List[str]) -> List[Tuple[str, List[str]]]:
        workers = self._config.processing.workers
        if workers > 1 and len(dialogue) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                return list(pool.map(self._process_dialogue, dialogue))
        return [self._process_dialogue(line) for line in dialogue]

    def process_lines(self, lines: Sequence[str]) -> Tuple[List[str], NormalizeReport]:
        """Return the rewritten lines and a report of what happened to each event."""
        numbers = [number for number, line in enumerate(lines, start=1) if is_dialogue_line(line)]
        results: Dict[int, Tuple[str, List[str]]] = dict(
            zip(numbers, self._process_all([lines[number - 1] for number in numbers]))
        )

        report = NormalizeReport()
        output: List[str] = []
        for number, line in enumerate(lines, start=1):
            if number not in results:
                output.append(line)
                continue
            kind, produced = results[number]
            if kind == _UNPARSED:
                LOGGER.warning("Failed to parse dialogue on line %d; keeping it unchanged", number)
                report.unparsed.append(number)
            elif kind == _DEGENERATE:
                LOGGER.warning(
                    "Dialogue on line %d does not end after it starts; policy=%s",
                    number,
                    self._config.processing.on_degenerate,
                )
                report.degenerate.append(number)
            else:
                report.events_in += 1
                report.events_out += len(produced)
            output.extend(produced)
        return output, report

    def run(self, source: Path, target: Optional[Path] = None) -> Tuple[Path, NormalizeReport]:
        target = target or source
        LOGGER.info("Processing %s", source)
        with source.open("r", encoding=self._config.processing.input_encoding) as handle:
            lines = handle.read().splitlines()
        output, report = self.process_lines(lines)
        self._writer.write(output, target)
        LOGGER.info(
            "Rewrote %d event(s) into %d; %d unparsed, %d degenerate",
            report.events_in,
            report.events_out,
            len(report.unparsed),
            len(report.degenerate),
        )
        return target, report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="subsnorm", description="Split and re-time long subtitle captions")
    parser.add_argument("--version", action="version", version="subsnorm 0.1.0")
    subparsers = parser.add_subparsers(dest="command")

    normalize = subparsers.add_parser("normalize", help="Normalize subtitles")
    normalize.add_argument("--in", dest="input", type=Path, required=True, help="Input file")
    normalize.add_argument("--out", dest="output", type=Path, default=None, help="Output file. By default = in")
    normalize.add_argument("--symbols", type=int, default=None, help="Max symbols in line")
    normalize.add_argument("--config", type=Path, default=None)
    normalize.add_argument("--workers", type=int, default=None)
    normalize.add_argument("--on-degenerate", dest="on_degenerate", choices=list(DEGENERATE_POLICIES))
    normalize.add_argument("-v", "--verbose", action="store_true")
    normalize.add_argument("-q", "--quiet", action="store_true")
    return parser


def _apply_cli_overrides(config: NormalizeConfig, args: argparse.Namespace) -> NormalizeConfig:
    overrides: Dict[str, Dict[str, object]] = {}
    if args.symbols is not None:
        overrides.setdefault("reading", {})["max_symbols"] = args.symbols
    if args.workers is not None:
        overrides.setdefault("processing", {})["workers"] = args.workers
    if args.on_degenerate:
        overrides.setdefault("processing", {})["on_degenerate"] = args.on_degenerate
    if overrides:
        config = apply_overrides(config, overrides)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=getattr(args, "verbose", False), quiet=getattr(args, "quiet", False))

    if args.command == "normalize":
        if args.config is not None:
            if not args.config.exists():
                raise FileNotFoundError(f"Configuration file not found: {args.config}")
            config = load_config(args.config)
        else:
            config = NormalizeConfig()
        config = _apply_cli_overrides(config, args)
        validate_config(config)
        if not args.input.exists():
            raise FileNotFoundError(f"Input file not found: {args.input}")
        pipeline = NormalizePipeline(config)
        output, _ = pipeline.run(args.input, args.output)
        LOGGER.info("Generated %s", output)
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
