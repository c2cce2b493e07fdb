#!/usr/bin/env python3
"""
main.py : compress and decompress a file, then report sizes and timings

For every path given (or one path typed at the prompt) the file is compressed
next to itself as compressed_<name>, decompressed again as
decompressed_<name>, and the round trip is checked byte for byte.

Usage:
    python main.py                        #Prompts for a path
    python main.py a.txt b.bin            #Benchmarks both files
    python main.py a.txt --csv out.csv    #Also writes one CSV row per file
    python main.py a.txt --keep           #Leaves the generated files on disk
"""

import argparse
import csv
import os
import sys
import time
import tracemalloc
from typing import Callable, List, Optional

from huffzip.files import compress_file, decompress_file, file_size

FIELDS = [
    "file", "original_size", "compressed_size", "decompressed_size",
    "compression_pct", "compression_time_ms", "compression_mem_kb",
    "decompression_time_ms", "decompression_mem_kb", "round_trip_ok",
]

#
#Utility helpers
#

def timed(step: Callable[[str], str], path: str):
    """Run one file step, returning(output path, elapsed ms, peak KiB).

    Time comes from time.perf_counter and peak memory from tracemalloc, so the
    numbers only cover the work done inside the step.
    """
    tracemalloc.start()
    t0 = time.perf_counter()
    out = step(path)
    t1 = time.perf_counter()
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return out, round((t1-t0)*1000, 3), round(peak/1024, 2)


def same_bytes(a: str, b: str) -> bool:
    with open(a, "rb") as fa, open(b, "rb") as fb:
        return fa.read() == fb.read()


def benchmark(path: str, keep: bool = False) -> dict:
    """Compress then decompress path and collect one result row.

    Raises RuntimeError when either step fails; the codec has already printed
    the reason. Generated files are removed unless keep is set, also on failure.
    """
    generated: List[str] = []
    try:
        compressed, c_ms, c_kb = timed(compress_file, path)
        if not compressed:
            raise RuntimeError("compression failed")
        generated.append(compressed)
        decompressed, d_ms, d_kb = timed(decompress_file, compressed)
        if not decompressed:
            raise RuntimeError("decompression failed")
        generated.append(decompressed)

        orig = file_size(path)
        comp = file_size(compressed)
        return{
            "file": path,
            "original_size": orig,
            "compressed_size": comp,
            "decompressed_size": file_size(decompressed),
            "compression_pct": round(100.0-comp/orig*100.0, 2) if orig > 0 else None,
            "compression_time_ms": c_ms,
            "compression_mem_kb": c_kb,
            "decompression_time_ms": d_ms,
            "decompression_mem_kb": d_kb,
            "round_trip_ok": same_bytes(path, decompressed),
        }
    finally:
        if not keep:
            for name in generated:
                os.remove(name)


def report(row: dict) -> None:
    print("\nFile sizes (in bytes):")
    print(f"{'Original:':<15}{row['original_size']}")
    print(f"{'Compressed:':<15}{row['compressed_size']}")
    print(f"{'Decompressed:':<15}{row['decompressed_size']}")
    if row["compression_pct"] is not None:
        print(f"Compression: {row['compression_pct']:.2f}%")
    print(f"Time Compress: {row['compression_time_ms']} ms")
    print(f"Time Decompress: {row['decompression_time_ms']} ms")
    if not row["round_trip_ok"]:
        print("[warn] decompressed file differs from the original")


#
#Main driver
#

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark Huffman compression on files.")
    parser.add_argument("paths", nargs="*", help="files to benchmark(prompted for when omitted)")
    parser.add_argument("--csv", metavar="PATH", help="also write the results as CSV to PATH")
    parser.add_argument(
        "--keep", action="store_true",
        help="keep the compressed_ and decompressed_ files next to each input"
    )
    args = parser.parse_args(argv)

    paths = args.paths or [input("Enter path to file: ").strip()]

    rows: List[dict] = []
    failed = 0
    for path in paths:
        try:
            row = benchmark(path, keep=args.keep)
        except (RuntimeError, OSError) as exc:
            #If file fails, skips and continues to next file
            print(f"[warn] {path}: {exc}")
            failed += 1
            continue
        if not row["round_trip_ok"]:
            failed += 1
        report(row)
        rows.append(row)

    if args.csv and rows:
        with open(args.csv, "w", newline="") as fp:
            writer = csv.DictWriter(fp, fieldnames=FIELDS)
            writer.writeheader()
            writer.writerows(rows)
        print(f"\n[info] Results saved to {args.csv}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
