#!/usr/bin/env python
"""Generate an OpenAPI document file and check it against its route snapshot.

Usage:
  python -m scripts.generate_spec --out backend/openapi.json
  python -m scripts.generate_spec --variant v2 --format yaml --out nile-auth.yaml
  python -m scripts.generate_spec --variant v2 --update-snapshot
  python -m scripts.generate_spec --variant v2 --check

Options:
  --variant NAME      Document variant: default (every route) or v2
  --format FMT        json (default) or yaml; same encoding the HTTP endpoints use
  --out PATH          Write the encoded document to PATH (directories auto-created)
  --snapshot PATH     Route snapshot file (defaults to tests/openapi_<variant>_routes.txt)
  --update-snapshot   Rewrite the snapshot from the current document
  --check             Exit non-zero if the documented routes != snapshot (CI check)

The snapshot lists one "METHOD path operationId" line per documented
operation, sorted, so drift shows up as a readable diff in review.

Safe Defaults:
  Without flags, prints the sha256 of the document to stdout.

Exit Codes:
  0 success / in-check mode routes match
  2 mismatch in --check mode (or missing snapshot)
  3 the document could not be generated or encoded
"""
from __future__ import annotations
import argparse, json, hashlib, logging, pathlib, sys

from nile_auth.exceptions import DocumentError
from nile_auth.formats import JsonAdapter, YamlAdapter
from nile_auth.openapi import VARIANTS, get_builder

TESTS_DIR = pathlib.Path(__file__).resolve().parents[1] / 'tests'
ADAPTERS = {'json': JsonAdapter, 'yaml': YamlAdapter}

logger = logging.getLogger('generate_spec')


def default_snapshot(variant: str) -> pathlib.Path:
    return TESTS_DIR / f'openapi_{variant}_routes.txt'


def spec_hash(spec) -> str:
    # hash is independent of the output format
    blob = json.dumps(spec, sort_keys=True, separators=(',', ':')).encode()
    return hashlib.sha256(blob).hexdigest()


def route_inventory(spec) -> list[str]:
    return sorted(
        f"{method.upper()} {path} {op['operationId']}"
        for path, ops in spec['paths'].items()
        for method, op in ops.items()
    )


def read_snapshot(path: pathlib.Path) -> list[str]:
    return sorted(line.strip() for line in path.read_text().splitlines() if line.strip())


def main(argv: list[str]) -> int:
    p = argparse.ArgumentParser(description="Generate deterministic OpenAPI document")
    p.add_argument('--variant', choices=VARIANTS, default='default', help='Document variant')
    p.add_argument('--format', dest='fmt', choices=sorted(ADAPTERS), default='json', help='Output format')
    p.add_argument('--out', dest='out', help='Path to write the encoded document')
    p.add_argument('--snapshot', dest='snapshot', help='Route snapshot file')
    p.add_argument('--update-snapshot', action='store_true', help='Overwrite route snapshot file')
    p.add_argument('--check', action='store_true', help='Check current routes vs snapshot and exit 2 on mismatch')
    args = p.parse_args(argv)

    builder = get_builder(args.variant)
    snapshot = pathlib.Path(args.snapshot) if args.snapshot else default_snapshot(args.variant)

    try:
        spec = builder.build()
        envelope = ADAPTERS[args.fmt](builder).serve() if args.out else None
    except DocumentError as exc:
        logger.error('%s %s', exc.message, exc.context)
        print(f"Cannot generate {args.variant} document: {exc.message}", file=sys.stderr)
        return 3
    routes = route_inventory(spec)

    if envelope is not None:
        out_path = pathlib.Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(envelope.payload)
        print(f"Wrote {args.fmt} document to {out_path} ({len(envelope.payload)} bytes)")

    if args.check:
        if not snapshot.exists():
            print(f"Snapshot {snapshot} missing; run with --update-snapshot", file=sys.stderr)
            return 2
        expected = read_snapshot(snapshot)
        if routes != expected:
            for line in sorted(set(expected) - set(routes)):
                print(f"- {line}", file=sys.stderr)
            for line in sorted(set(routes) - set(expected)):
                print(f"+ {line}", file=sys.stderr)
            print(f"Route snapshot mismatch for {args.variant}: {snapshot}", file=sys.stderr)
            return 2
        print(f"Route snapshot OK: {len(routes)} operations")

    if args.update_snapshot:
        snapshot.parent.mkdir(parents=True, exist_ok=True)
        snapshot.write_text('\n'.join(routes) + '\n')
        print(f"Updated route snapshot -> {snapshot} ({len(routes)} operations)")

    if not args.out and not args.update_snapshot and not args.check:
        print(spec_hash(spec))

    return 0


if __name__ == '__main__':  # pragma: no cover
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    sys.exit(main(sys.argv[1:]))
