import argparse
import json
import sys
from pathlib import Path

from radattrs.core.binary import hex_to_bytes
from radattrs.models import AttributeList
from radattrs.parsing.attributes import build_attribute_snapshot, encode_original_order, encode_sorted


def _decode(args: argparse.Namespace) -> int:
    snapshot = build_attribute_snapshot(hex_to_bytes(args.hex), source="cli")
    print(json.dumps(snapshot.as_dict(), indent=2))
    if args.strict and not snapshot.ok:
        return 1
    return 0


def _encode(args: argparse.Namespace) -> int:
    if args.path == "-":
        document = sys.stdin.read()
    else:
        document = Path(args.path).read_text(encoding="utf-8")
    store = AttributeList.model_validate_json(document).to_store()
    encoded = encode_sorted(store) if args.sorted else encode_original_order(store)
    print(encoded.hex())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="radattrs", description="Inspect and build TLV attribute regions.")
    commands = parser.add_subparsers(dest="command", required=True)

    decode = commands.add_parser("decode", help="Decode a hex attribute region to JSON.")
    decode.add_argument("hex", type=str, help="Attribute bytes as hex.")
    decode.add_argument("--strict", action="store_true", help="Exit with status 1 on a malformed buffer.")
    decode.set_defaults(handler=_decode)

    encode = commands.add_parser("encode", help="Encode a JSON attribute list to hex.")
    encode.add_argument("path", type=str, help="JSON file with a 'records' list, or '-' for stdin.")
    order = encode.add_mutually_exclusive_group()
    order.add_argument("--sorted", action="store_true", help="Group records by ascending type.")
    order.add_argument("--original-order", dest="sorted", action="store_false", help="Keep record order (default).")
    encode.set_defaults(handler=_encode)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.handler(args)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
