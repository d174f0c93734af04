#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import subprocess
import sys

from dotenv import load_dotenv

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from utils import PROJECT_ROOT

env_path = os.path.join(PROJECT_ROOT, 'reproducibility', '.env')
if os.path.exists(env_path):
    load_dotenv(env_path)
else:
    load_dotenv()

def resolve_path(path_str):
    """Resolves paths starting with ./ relative to PROJECT_ROOT"""
    if path_str.startswith("./"):
        return os.path.join(PROJECT_ROOT, path_str[2:])
    return path_str

# Configuration with path resolution
OUTPUT_CSV = resolve_path(os.getenv("BENCH_OUTPUT_CSV", "./benchmark_results.csv"))
PLOTS_DIR = resolve_path(os.getenv("BENCH_PLOTS_DIR", "./analysis_plots"))

def run_phase(script_name, description):
    print(f"\n{'=' * 20} {description} {'=' * 20}")
    script_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), f"{script_name}.py")
    try:
        env = os.environ.copy()
        # Pass RESOLVED absolute paths to sub-processes
        env["BENCH_OUTPUT_CSV"] = OUTPUT_CSV
        env["BENCH_PLOTS_DIR"] = PLOTS_DIR

        subprocess.run([sys.executable, script_path], check=True, env=env)
        print(f"\n{'=' * 20} {description} - SUCCESS {'=' * 20}\n")
        return True
    except subprocess.CalledProcessError:
        return False

def main():
    print("--- Initializing Benchmark Environment ---")

    if not run_phase("benchmark_suite", "PHASE 1: LATENCY BENCHMARK"): sys.exit(1)
    if not run_phase("analyze_results", "PHASE 2: RESULT ANALYSIS"): sys.exit(1)

if __name__ == "__main__":
    main()
