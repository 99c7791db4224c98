#!/usr/bin/env python3
"""
Validator for generated Huffman codec test vectors.

Reads manifest.json written by generate.py and checks:
- compressed streams decompress to inputs with the recorded MD5
- compressing the input again reproduces the recorded compressed MD5
- truncated streams are rejected with FormatError

Usage:
    python validate.py --vectors ../input-generators/output
"""

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

# Make the repo root importable when run from this directory
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from huffcodec import FormatError, compress, decompress  # noqa: E402

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "input-generators"))

from common import calculate_md5  # noqa: E402


@dataclass
class ValidationResult:
    vector_name: str
    passed: bool = True
    errors: List[str] = field(default_factory=list)

    def fail(self, message: str) -> None:
        self.passed = False
        self.errors.append(message)


def validate_vector(vectors_dir: Path, info: dict) -> ValidationResult:
    """Validate one manifest entry."""
    result = ValidationResult(info["name"])

    input_data = (vectors_dir / info["input_file"]).read_bytes()
    compressed = (vectors_dir / info["compressed_file"]).read_bytes()

    if calculate_md5(input_data) != info["input_md5"]:
        result.fail("input MD5 mismatch")

    try:
        output = decompress(compressed)
    except FormatError as e:
        result.fail(f"decompression failed: {e}")
    else:
        if calculate_md5(output) != info["input_md5"]:
            result.fail("round-trip MD5 mismatch")

    if calculate_md5(compress(input_data)) != info["compressed_md5"]:
        result.fail("compressed MD5 mismatch (non-deterministic output?)")

    if info.get("truncated_file"):
        truncated = (vectors_dir / info["truncated_file"]).read_bytes()
        try:
            decompress(truncated)
        except FormatError:
            pass
        else:
            result.fail("truncated stream was accepted")

    return result


def main():
    parser = argparse.ArgumentParser(description="Validate Huffman codec test vectors")
    parser.add_argument("--vectors", "-v", type=Path, required=True,
                        help="Directory containing manifest.json")
    args = parser.parse_args()

    manifest_file = args.vectors / "manifest.json"
    with open(manifest_file) as f:
        manifest = json.load(f)

    failures = 0
    for info in manifest:
        result = validate_vector(args.vectors, info)
        status = "PASS" if result.passed else "FAIL"
        print(f"  [{status}] {result.vector_name}")
        for error in result.errors:
            print(f"         {error}")
        if not result.passed:
            failures += 1

    print(f"\n{len(manifest) - failures}/{len(manifest)} vectors passed")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
