#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
isogf: Latency Benchmark
------------------------
Times GF(2^8) multiplication, inversion and exponentiation over boundary and
interior operands.  Every operation should take the same time for every
operand; the CSV written here is summarised by analyze_results.py.

Usage:
    python3 reproducibility/benchmarks/benchmark_suite.py
"""

import csv
import gc
import os
import sys

import numpy as np

current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.append(current_dir)
from utils import PROJECT_ROOT, get_system_info, setup_logger, time_call

from isogf import GF

logger = setup_logger("BenchmarkSuite")

# --- Configuration ---
OUTPUT_CSV_FILE = os.getenv("BENCH_OUTPUT_CSV", os.path.join(PROJECT_ROOT, "benchmark_results.csv"))
NUM_WARMUP_RUNS = int(os.getenv("BENCH_WARMUP_RUNS", "5"))
NUM_TIMED_RUNS = int(os.getenv("BENCH_TIMED_RUNS", "200"))
BENCH_OPS_ENV = os.getenv("BENCH_OPS", "all").lower()
OPS = ["mul", "inv", "pow"] if BENCH_OPS_ENV == "all" else [op.strip() for op in BENCH_OPS_ENV.split(",") if op.strip()]

SAMPLE_BYTES = [0, 64, 128, 196, 255]
POW_BASE = 0x53
POW_EXPONENTS = [0, 1, 127, 254, 255]

def _mul(a, b): return a * b
def _inv(a): return a.multiplicative_inverse()
def _pow(a, e): return a ** e

def build_cases():
    """Returns (op, label, func, args) tuples for every selected operation."""
    cases = []
    if "mul" in OPS:
        for a, b in zip(SAMPLE_BYTES, SAMPLE_BYTES[1:]):
            cases.append(("mul", f"[{a}, {b}]", _mul, (GF(a), GF(b))))
    if "inv" in OPS:
        for a in SAMPLE_BYTES:
            cases.append(("inv", f"{a}", _inv, (GF(a),)))
    if "pow" in OPS:
        for e in POW_EXPONENTS:
            cases.append(("pow", f"{POW_BASE:#04x}^{e}", _pow, (GF(POW_BASE), e)))
    return cases

def main():
    logger.info(f"--- isogf Benchmark (Ops: {OPS}, Warmup: {NUM_WARMUP_RUNS}, Runs: {NUM_TIMED_RUNS}) ---")

    unknown = [op for op in OPS if op not in ("mul", "inv", "pow")]
    if unknown:
        logger.error(f"Unknown operation(s) in BENCH_OPS: {unknown}"); sys.exit(1)

    cases = build_cases()
    system_info = get_system_info()
    os.makedirs(os.path.dirname(OUTPUT_CSV_FILE), exist_ok=True)

    with open(OUTPUT_CSV_FILE, 'a', newline='') as csvfile:
        csv_writer = csv.writer(csvfile)
        if os.path.getsize(OUTPUT_CSV_FILE) == 0:
            header = ["Timestamp", "Hostname", "Platform", "PythonImpl", "PythonVersion",
                      "Operation", "Input", "RunNum", "Time_s"]
            csv_writer.writerow(header)

        for op, label, func, args in cases:
            logger.info(f"Processing: {op} {label}")
            time_call(func, args, NUM_WARMUP_RUNS)

            gc.disable()
            try:
                times_taken = time_call(func, args, NUM_TIMED_RUNS)
            finally:
                gc.enable()

            for run_num, t in enumerate(times_taken, start=1):
                csv_writer.writerow([
                    system_info["timestamp"], system_info["hostname"], system_info["platform"],
                    system_info["python_implementation"], system_info["python_version"],
                    op, label, run_num, f"{t:.9f}",
                ])

            if times_taken:
                logger.info(f"Summary: median={float(np.median(times_taken)) * 1e6:.2f}us, std={float(np.std(times_taken)) * 1e6:.2f}us")
            csvfile.flush()

    logger.info(f"Benchmark completed. Results in {OUTPUT_CSV_FILE}")

if __name__ == "__main__": main()
