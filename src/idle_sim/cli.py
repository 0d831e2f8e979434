"""Command line: run a batch of fighting or thieving trials and print the report.

    idle-sim fighting --player-hit-chance 0.8 --trials 5000
    idle-sim thieving --config saved.json --seed 7 --workers 4

Every config field is exposed as a ``--kebab-case`` flag.  Flags given
explicitly override values loaded with ``--config``.  Ctrl-C stops
scheduling further trials and prints the report for the trials that
finished.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Any

from pydantic import BaseModel, ValidationError

from idle_sim.config.batch import BatchConfig
from idle_sim.config.storage import CONFIG_TYPES, ProcessConfig, load_config, save_config
from idle_sim.engine.batch import CancelToken, run_batch_from
from idle_sim.report import EmptyPopulationError, aggregate

logger = logging.getLogger(__name__)


def _flag(name: str) -> str:
    return "--" + name.replace("_", "-")


def _add_model_args(ap: argparse.ArgumentParser, model_cls: type[BaseModel]) -> None:
    """One flag per model field; defaults stay None so we can tell what was given."""
    group = ap.add_argument_group(f"{model_cls.__name__} fields")
    for name, field_info in model_cls.model_fields.items():
        annotation = field_info.annotation
        arg_type = annotation if annotation in (int, float) else str
        group.add_argument(
            _flag(name),
            dest=name,
            type=arg_type,
            default=None,
            help=f"{field_info.description} (default: {field_info.default})",
        )


def _add_batch_args(ap: argparse.ArgumentParser) -> None:
    defaults = BatchConfig()
    ap.add_argument("--trials", type=int, default=defaults.trial_count,
                    help=f"Number of trials (default: {defaults.trial_count})")
    ap.add_argument("--seed", type=int, default=None, help="Seed for a reproducible batch")
    ap.add_argument("--workers", type=int, default=defaults.workers,
                    help="Worker processes (default: 1 = in-process)")
    ap.add_argument("--chunk-size", type=int, default=defaults.chunk_size,
                    help="Trials per worker job")
    ap.add_argument("--config", type=str, default=None, help="Load a saved JSON config")
    ap.add_argument("--save-config", type=str, default=None,
                    help="Write the effective config to this JSON file")
    ap.add_argument("--no-progress", action="store_true", help="Do not print progress to stderr")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="idle-sim",
        description="Monte-Carlo estimates of 8-hour fighting and thieving sessions",
    )
    sub = p.add_subparsers(dest="process")
    for process, model_cls in CONFIG_TYPES.items():
        sp = sub.add_parser(process, help=f"Simulate {process} sessions")
        _add_batch_args(sp)
        _add_model_args(sp, model_cls)
    return p


def _build_config(process: str, args: argparse.Namespace) -> ProcessConfig:
    model_cls = CONFIG_TYPES[process]
    base: dict[str, Any] = {}
    if args.config:
        loaded = load_config(args.config)
        if not isinstance(loaded, model_cls):
            raise ValueError(f"{args.config} holds a {type(loaded).__name__}, expected {model_cls.__name__}")
        base = loaded.model_dump()
    for name in model_cls.model_fields:
        value = getattr(args, name, None)
        if value is not None:
            base[name] = value
    return model_cls.model_validate(base)


def _progress_printer(label: str):
    step = [0]

    def report(completed: int, total: int) -> None:
        # Only redraw on whole-percent changes.
        percent = completed * 100 // total
        if percent == step[0] and completed < total:
            return
        step[0] = percent
        print(f"\r{label} {percent:>3d}% ({completed}/{total})", end="", file=sys.stderr)
        if completed >= total:
            print(file=sys.stderr)

    return report


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.process is None:
        parser.print_help()
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(args.process, args)
        batch = BatchConfig(
            trial_count=args.trials,
            random_seed=args.seed,
            workers=args.workers,
            chunk_size=args.chunk_size,
        )
        if args.save_config:
            path = save_config(config, args.save_config)
            logger.info("Saved config to %s", path)
    except (ValidationError, ValueError, OSError) as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        return 2

    cancel = CancelToken()
    progress = None if args.no_progress else _progress_printer(args.process)
    previous = signal.signal(signal.SIGINT, lambda signum, frame: cancel.cancel())
    try:
        population = run_batch_from(config, batch, cancel=cancel, progress=progress)
    finally:
        signal.signal(signal.SIGINT, previous)

    if population.cancelled:
        print(f"\nStopped after {len(population)} of {population.requested} trials.", file=sys.stderr)

    try:
        report = aggregate(population)
    except EmptyPopulationError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"\n{report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
