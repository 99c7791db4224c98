#!/usr/bin/env python3
"""
Huffman codec test vector generator.

Generates seeded input corpora, compresses them with the codec CLI, and
records sizes and MD5 sums. Vectors flagged with `truncate` also get a
copy of the compressed stream cut before the terminator code, which a
correct decoder must reject.

Examples:
    # Vectors from the bundled config
    python generate.py --config vectors.yaml --output-dir ./vectors

    # Ad-hoc vectors
    python generate.py --output-dir ./vectors --patterns text,skewed --size 1MB

    # Truncated copies of every vector
    python generate.py --config vectors.yaml -o ./vectors --inject-truncated
"""

import argparse
import json
import subprocess
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional

import numpy as np
import yaml

from common import calculate_md5, generate_input_data

# Default CLI location (repo root, two levels above input-generators/)
DEFAULT_IMPL = Path(__file__).resolve().parent.parent.parent / "cli.py"


@dataclass
class TestVectorInfo:
    name: str
    pattern: str
    seed: int

    input_file: str
    input_md5: str
    input_size: int

    compressed_file: str
    compressed_md5: str
    compressed_size: int

    # Only present if a truncated copy was written
    truncated_file: str = ""
    truncated_size: int = 0


def compress_with_impl(impl_path: Path, input_file: Path) -> Optional[Path]:
    """Compress using implementation CLI."""
    try:
        result = subprocess.run(
            [sys.executable, str(impl_path), str(input_file)],
            cwd=input_file.parent,
            capture_output=True,
            text=True,
            timeout=600,
        )
    except (OSError, subprocess.SubprocessError) as e:
        print(f"    Compression error: {e}")
        return None

    if result.returncode != 0:
        print(f"    Compression error: {result.stderr.strip()}")
        return None

    compressed = Path(str(input_file) + ".hf")
    return compressed if compressed.exists() else None


def truncate_stream(data: bytes, seed: int) -> bytes:
    """Drop between 1 and 8 trailing bytes, keeping at least the magic."""
    rng = np.random.default_rng(seed)
    drop = int(rng.integers(1, 9))
    return data[: max(4, len(data) - drop)]


def generate_vector(
    output_dir: Path,
    name: str,
    pattern: str,
    size: int,
    impl_path: Path,
    seed: int,
    truncate: bool = False,
) -> Optional[TestVectorInfo]:
    """Generate a single test vector."""
    print(f"\n  {name}: {pattern}, {size:,} bytes...")

    input_file = output_dir / f"{name}_input.bin"
    input_data = generate_input_data(pattern, size, seed)
    input_file.write_bytes(input_data)

    compressed_file = compress_with_impl(impl_path, input_file)
    if not compressed_file:
        print("    ERROR: Compression failed")
        return None

    compressed_data = compressed_file.read_bytes()
    clean_file = output_dir / f"{name}_compressed.hf"
    compressed_file.replace(clean_file)

    ratio = len(input_data) / len(compressed_data) if compressed_data else 0
    print(f"    Compressed: {len(compressed_data):,} bytes (ratio: {ratio:.2f}x)")

    info = TestVectorInfo(
        name=name,
        pattern=pattern,
        seed=seed,
        input_file=input_file.name,
        input_md5=calculate_md5(input_data),
        input_size=len(input_data),
        compressed_file=clean_file.name,
        compressed_md5=calculate_md5(compressed_data),
        compressed_size=len(compressed_data),
    )

    if truncate:
        truncated_data = truncate_stream(compressed_data, seed)
        truncated_file = output_dir / f"{name}_truncated.hf"
        truncated_file.write_bytes(truncated_data)
        info.truncated_file = truncated_file.name
        info.truncated_size = len(truncated_data)
        print(f"    Truncated: {len(truncated_data):,} bytes")

    meta_file = output_dir / f"{name}_metadata.json"
    with open(meta_file, "w") as f:
        json.dump(asdict(info), f, indent=2)

    return info


def parse_size(s: str) -> int:
    """Parse size string like '1MB' to bytes."""
    s = s.upper().strip()
    for suffix, mult in [("GB", 1024**3), ("MB", 1024**2), ("KB", 1024), ("B", 1)]:
        if s.endswith(suffix):
            return int(float(s[: -len(suffix)]) * mult)
    return int(s)


def parse_list(s: str) -> List[str]:
    """Parse comma-separated list."""
    if not s:
        return []
    return [x.strip() for x in s.split(",")]


def load_config(path: Path) -> dict:
    """Load a YAML vector definition file."""
    with open(path, "r") as f:
        return yaml.safe_load(f)


def main():
    parser = argparse.ArgumentParser(
        description="Generate Huffman codec test vectors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", type=Path,
                        help="YAML file listing vectors (overrides --patterns/--size)")
    parser.add_argument("--output-dir", "-o", type=Path, default=Path("./output"),
                        help="Output directory")
    parser.add_argument("--size", "-s", type=str, default="64KB",
                        help="Size of each ad-hoc vector (e.g., 64KB, 1MB)")
    parser.add_argument("--patterns", type=str, default="text,skewed,entropy",
                        help="Comma-separated patterns: text,skewed,entropy,single,edge,zeros")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--impl", "-i", type=Path, default=DEFAULT_IMPL,
                        help="Path to cli.py")
    parser.add_argument("--inject-truncated", action="store_true",
                        help="Write a truncated copy of every vector")
    args = parser.parse_args()

    if not args.impl.exists():
        print(f"Error: implementation not found: {args.impl}", file=sys.stderr)
        return 1

    if args.config:
        config = load_config(args.config)
        seed = config.get("seed", args.seed)
        vectors = config["vectors"]
    else:
        seed = args.seed
        size = parse_size(args.size)
        vectors = [
            {"name": f"{pattern}-{args.size.lower()}", "pattern": pattern, "size": size}
            for pattern in parse_list(args.patterns)
        ]

    args.output_dir.mkdir(parents=True, exist_ok=True)
    print(f"Generating {len(vectors)} vectors into {args.output_dir}")

    manifest = []
    for offset, vector in enumerate(vectors):
        info = generate_vector(
            args.output_dir,
            vector["name"],
            vector["pattern"],
            int(vector["size"]),
            args.impl,
            seed + offset,
            truncate=args.inject_truncated or vector.get("truncate", False),
        )
        if info is None:
            return 1
        manifest.append(asdict(info))

    manifest_file = args.output_dir / "manifest.json"
    with open(manifest_file, "w") as f:
        json.dump(manifest, f, indent=2)

    print(f"\nManifest: {manifest_file}")
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
