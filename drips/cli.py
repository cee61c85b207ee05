"""drips.cli

Command line interface entry point for drips.

Design constraints:
- argparse-based.
- Lazy imports: do not import pydantic schemas at parse time.
- Output is JSON on stdout; errors go to stderr with exit code 1.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

EPILOG = "Values printed here are what the contracts read. Check them twice."


@dataclass(frozen=True)
class CliContext:
    repo_root: Path


def _repo_root_from_cwd() -> Path:
    return Path.cwd()


def _uint(raw: str) -> int:
    """Decimal or 0x-prefixed hex."""

    try:
        value = int(raw, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {raw}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drips",
        description="Encode and validate Drips protocol values.",
        epilog=EPILOG,
    )
    parser.add_argument("--version", action="store_true", help="Print version and exit.")

    sub = parser.add_subparsers(dest="command")

    p_cfg = sub.add_parser("config", help="Pack or unpack a stream config")
    cfg_sub = p_cfg.add_subparsers(dest="config_command", required=True)
    p_enc = cfg_sub.add_parser("encode", help="StreamConfig fields -> uint256")
    p_enc.add_argument("--stream-id", type=_uint, required=True)
    p_enc.add_argument("--amount-per-second", type=_uint, required=True)
    p_enc.add_argument("--start", type=_uint, default=0)
    p_enc.add_argument("--duration", type=_uint, default=0)
    p_dec = cfg_sub.add_parser("decode", help="uint256 -> StreamConfig fields")
    p_dec.add_argument("packed", type=_uint)

    p_acct = sub.add_parser("account", help="Describe an account id")
    p_acct.add_argument("account_id", type=_uint)

    p_rate = sub.add_parser("rate", help="Human rate -> amountPerSecond")
    p_rate.add_argument("amount")
    p_rate.add_argument("--unit", default=None, help="second|minute|hour|day|week|month|year")
    p_rate.add_argument("--decimals", type=int, default=None, help="Token decimals")

    p_meta = sub.add_parser("metadata", help="Validate a metadata document")
    meta_sub = p_meta.add_subparsers(dest="metadata_command", required=True)
    p_val = meta_sub.add_parser("validate", help="Find the schema version a document matches")
    p_val.add_argument("path", type=Path)
    p_val.add_argument(
        "--family",
        required=True,
        choices=["address-driver", "repo-driver", "nft-driver", "immutable-splits"],
    )
    p_val.add_argument("--latest", action="store_true", help="Accept the newest version only.")

    return parser


def _print_version() -> None:
    from drips import __version__

    print(f"drips v{__version__}")


def _emit(obj: Any) -> None:
    print(json.dumps(obj, indent=2, sort_keys=True))


def _load_config(ctx: CliContext):
    from drips.core.config import Config

    default = ctx.repo_root / "config" / "default.yaml"
    return Config.from_yaml(default) if default.exists() else Config()


def _cmd_config(ctx: CliContext, args: argparse.Namespace) -> int:
    from drips.codec.stream_config import decode_stream_config, encode_stream_config
    from drips.core.types import StreamConfig

    if args.config_command == "encode":
        packed = encode_stream_config(
            StreamConfig(
                stream_id=args.stream_id,
                amount_per_second=args.amount_per_second,
                start=args.start,
                duration_seconds=args.duration,
            )
        )
        _emit({"packed": str(packed), "hex": f"0x{packed:064x}"})
        return 0

    c = decode_stream_config(args.packed)
    _emit(
        {
            "streamId": c.stream_id,
            "amountPerSecond": str(c.amount_per_second),
            "start": c.start,
            "durationSeconds": c.duration_seconds,
        }
    )
    return 0


def _cmd_account(ctx: CliContext, args: argparse.Namespace) -> int:
    from drips.codec.account_id import address_of, driver_of, text_identifier_of
    from drips.core.types import DriverTag

    driver = driver_of(args.account_id)
    out: dict[str, Any] = {"accountId": str(args.account_id), "driver": driver.label}
    if driver is DriverTag.ADDRESS:
        out["address"] = address_of(args.account_id)
    elif driver is DriverTag.REPO:
        orcid = text_identifier_of(args.account_id)
        if orcid is not None:
            out["orcid"] = orcid
    _emit(out)
    return 0


def _cmd_rate(ctx: CliContext, args: argparse.Namespace) -> int:
    from drips.codec.stream_rate import TimeUnit, parse_stream_rate, validate_stream_rate

    cfg = _load_config(ctx)
    unit = TimeUnit.from_name(args.unit or cfg.streams.time_unit)
    decimals = cfg.streams.token_decimals if args.decimals is None else args.decimals

    amount_per_second = parse_stream_rate(args.amount, unit, decimals)
    validate_stream_rate(amount_per_second)
    _emit({"amountPerSecond": str(amount_per_second), "unit": unit.name.lower(), "decimals": decimals})
    return 0


def _cmd_metadata(ctx: CliContext, args: argparse.Namespace) -> int:
    from drips.metadata import PARSERS_BY_FAMILY

    try:
        data = json.loads(args.path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    parser = PARSERS_BY_FAMILY[args.family]
    if args.latest:
        parser.parse_latest(data)
        version = parser.latest.name
    else:
        version = parser.match(data).version

    _emit({"family": args.family, "version": version, "latest": version == parser.latest.name})
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        _print_version()
        return 0

    if not args.command:
        parser.print_help()
        return 2

    ctx = CliContext(repo_root=_repo_root_from_cwd())

    from drips.core.exceptions import DripsError
    from drips.core.logs import configure_logging

    try:
        configure_logging(_load_config(ctx).logging)
    except DripsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    dispatch: dict[str, Callable[[CliContext, argparse.Namespace], int]] = {
        "config": _cmd_config,
        "account": _cmd_account,
        "rate": _cmd_rate,
        "metadata": _cmd_metadata,
    }

    fn = dispatch.get(str(args.command))
    if fn is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 2

    try:
        return int(fn(ctx, args))
    except (DripsError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
