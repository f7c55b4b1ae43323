#!/usr/bin/env python3
"""
Generate Poseidon test vectors.

For every arity from 1 to --max-arity and every j below --count, hashes the
input [j] * arity and writes the digests as a JSON list of hex-string lists.
With the defaults the output is byte-identical to
poseidon_bn128/test-data/test_hashes.json.

Usage:
    python gen-test-vectors.py > test_hashes.json
    python gen-test-vectors.py --output test_hashes.json
    python gen-test-vectors.py --check
"""

import argparse
import sys
import time
from pathlib import Path

from poseidon_bn128 import MAX_ARITY, PoseidonError
from poseidon_bn128.test_vectors import (
    DEFAULT_COUNT,
    compare_vectors,
    dumps_vectors,
    generate_vectors,
    load_vectors,
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate Poseidon BN254 test vectors")
    parser.add_argument("--max-arity", type=int, default=MAX_ARITY,
                        help=f"Highest arity to hash (default: {MAX_ARITY})")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT,
                        help=f"Inputs per arity (default: {DEFAULT_COUNT})")
    parser.add_argument("--output", type=Path,
                        help="Write JSON here instead of stdout")
    parser.add_argument("--check", action="store_true",
                        help="Compare against the shipped reference vectors instead of writing")
    args = parser.parse_args()

    t0 = time.time()
    try:
        vectors = generate_vectors(args.max_arity, args.count)
    except (PoseidonError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Hashed {args.max_arity} arities x {args.count} inputs in {time.time() - t0:.1f}s",
          file=sys.stderr)

    if args.check:
        reference = [row[:args.count] for row in load_vectors()[:args.max_arity]]
        mismatches = compare_vectors(reference, vectors)
        for arity, j, expected, actual in mismatches[:20]:
            print(f"MISMATCH arity={arity} j={j}: expected {expected}, got {actual}", file=sys.stderr)
        if mismatches:
            print(f"{len(mismatches)} digests differ from the reference", file=sys.stderr)
            return 1
        print("All digests match the reference vectors", file=sys.stderr)
        return 0

    output = dumps_vectors(vectors)
    if args.output:
        args.output.write_text(output + "\n")
        print(f"Wrote {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
