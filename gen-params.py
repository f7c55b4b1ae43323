#!/usr/bin/env python3
"""
Regenerate Poseidon parameter files with the Grain LFSR.

Writes params/<arity>.json ({"C": [...], "M": [[...]]}) for each requested
arity. With the default output directory this rewrites the files shipped in
poseidon_bn128/params; the result must be identical to what is checked in.

Usage:
    python gen-params.py
    python gen-params.py --arity 2 --arity 3 --output-dir /tmp/params
"""

import argparse
import json
import sys
from pathlib import Path

from poseidon_bn128 import MAX_ARITY, MIN_ARITY, PoseidonError
from poseidon_bn128.constants import PARAMS_DIR
from poseidon_bn128.grain import generate_parameters


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate Poseidon BN254 round constants and MDS matrices")
    parser.add_argument("--arity", type=int, action="append",
                        help="Arity to generate (repeatable; default: all)")
    parser.add_argument("--output-dir", type=Path, default=PARAMS_DIR,
                        help=f"Directory for <arity>.json files (default: {PARAMS_DIR})")
    args = parser.parse_args()

    arities = args.arity or list(range(MIN_ARITY, MAX_ARITY + 1))
    args.output_dir.mkdir(parents=True, exist_ok=True)

    for arity in arities:
        try:
            params = generate_parameters(arity)
        except PoseidonError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        path = args.output_dir / f"{arity}.json"
        path.write_text(json.dumps(params, separators=(",", ":")) + "\n")
        print(f"arity {arity}: {len(params['C'])} round constants, "
              f"{len(params['M'])}x{len(params['M'])} MDS -> {path}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
