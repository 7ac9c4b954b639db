"""Command line harness for the mixin_math numeric helpers."""

import argparse
import json
import math
import re
import sys
from collections import Counter
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "math_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from mixin_math import PCG32, SampleConfig, Width, lookup, run_round_random_sample
from mixin_math.registry import operation_names

SAMPLE_COMMAND = "sample"

# -5, -.5, -1e-3, -inf, -nan: operands, never option flags
NEGATIVE_NUMBER = re.compile(r"^-(\d|\.\d|inf(inity)?$|nan$)", re.IGNORECASE)


def _parse_int(value: str) -> int:
    """Accept decimal or 0x-prefixed integers."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc


def _parse_float(value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected a number, received '{value}'.") from exc


def _parse_positive(value: str) -> int:
    parsed = _parse_int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Draw count must be a positive integer.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate a mixin_math numeric helper")
    parser._negative_number_matcher = NEGATIVE_NUMBER
    parser.add_argument(
        "operation",
        choices=operation_names() + (SAMPLE_COMMAND,),
        help="Helper to evaluate, or 'sample' for the stochastic rounding harness",
    )
    parser.add_argument("args", nargs="*", help="Operands, value first")
    parser.add_argument(
        "--width",
        choices=[width.value for width in Width],
        default=Width.F64.value,
        help="Numeric width of the entry point (default f64)",
    )
    parser.add_argument(
        "--seed",
        type=_parse_int,
        default=0xA2B94D10,
        help="PCG32 seed for random helpers (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--draws",
        type=_parse_positive,
        default=None,
        help="Repeat a random helper and report the outcome histogram",
    )
    parser.add_argument(
        "--value",
        type=_parse_float,
        default=3.8,
        help="Value rounded by the 'sample' command",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "math_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def _coerce_operands(parser, spec, raw):
    if len(raw) != spec.arity:
        parser.error(f"{spec.name} takes {spec.arity} operand(s), received {len(raw)}")

    operands = []
    for index, text in enumerate(raw):
        # integer between overloads take a 32-bit float minimum
        as_int = spec.width.is_integer and not (spec.name == "between" and index == 1)
        try:
            operands.append(_parse_int(text) if as_int else _parse_float(text))
        except argparse.ArgumentTypeError as exc:
            parser.error(str(exc))
    return operands


def evaluate(parser, args) -> dict:
    if args.operation == SAMPLE_COMMAND:
        if args.args:
            parser.error("sample takes no operands; use --value, --draws and --seed")
        cfg = SampleConfig(
            seed=args.seed,
            draws=args.draws or SampleConfig.draws,
            value=args.value,
            width=Width(args.width),
        )
        try:
            return run_round_random_sample(cfg)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        spec = lookup(args.operation, Width(args.width))
    except KeyError as exc:
        parser.error(exc.args[0])

    operands = _coerce_operands(parser, spec, args.args)
    report = {
        "operation": spec.name,
        "width": spec.width.value,
        "args": operands,
    }

    if not spec.uses_random:
        report["result"] = spec.func(*operands)
        return report

    rng = PCG32.seeded(args.seed)
    report["seed"] = args.seed
    if args.draws is None:
        report["result"] = spec.func(*operands, rng)
        return report

    outcomes = Counter(spec.func(*operands, rng) for _ in range(args.draws))
    report["draws"] = args.draws
    report["counts"] = {str(key).lower(): outcomes[key] for key in sorted(outcomes)}
    return report


def _json_safe(payload):
    """Spell non-finite floats as strings so the report stays strict JSON."""

    if isinstance(payload, float) and not math.isfinite(payload):
        return str(payload)
    if isinstance(payload, dict):
        return {key: _json_safe(value) for key, value in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [_json_safe(value) for value in payload]
    return payload


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    result = _json_safe(evaluate(parser, args))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2, allow_nan=False))

    print(json.dumps(result, indent=2, allow_nan=False))


if __name__ == "__main__":
    main()
