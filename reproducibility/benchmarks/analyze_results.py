#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
isogf: Benchmark Result Analysis
--------------------------------
This script processes the CSV results from benchmark_suite.py, performs
outlier removal, tabulates the median latency per operand and reports how far
the fastest and slowest operands of each operation are apart.

Usage:
    python3 reproducibility/benchmarks/analyze_results.py
"""

import os
import sys

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from tabulate import tabulate

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from utils import PROJECT_ROOT, setup_logger

logger = setup_logger("AnalyzeResults")

# --- Configuration ---
CSV_FILE_PATH = os.getenv("BENCH_OUTPUT_CSV", os.path.join(PROJECT_ROOT, "benchmark_results.csv"))
PLOTS_OUTPUT_DIR = os.getenv("BENCH_PLOTS_DIR", os.path.join(PROJECT_ROOT, "analysis_plots"))

# --- Styles ---
sns.set_theme(style="whitegrid", palette="viridis", font_scale=1.1)

def load_and_prepare_data(csv_path):
    """Loads and cleans the benchmark DataFrame."""
    if not os.path.exists(csv_path):
        logger.error(f"CSV file '{csv_path}' not found.")
        return None

    df = pd.read_csv(csv_path, dtype={"Input": str})
    logger.info(f"Data loaded: {len(df)} rows.")

    df["Time_s"] = pd.to_numeric(df["Time_s"], errors='coerce')
    df.dropna(subset=["Operation", "Input", "Time_s"], inplace=True)
    df["Time_us"] = df["Time_s"] * 1e6

    logger.info(f"Valid rows after cleaning: {len(df)}.")
    return df

def clean_outliers_iqr(df):
    """Removes outliers using the IQR method per operation and operand."""
    if df.empty: return df

    original_rows = len(df)

    def remove_outliers_group(group):
        if len(group) < 4: return group
        q1 = group["Time_us"].quantile(0.25)
        q3 = group["Time_us"].quantile(0.75)
        iqr = q3 - q1
        if iqr == 0: return group
        lower = q1 - 1.5 * iqr
        upper = q3 + 1.5 * iqr
        return group[(group["Time_us"] >= lower) & (group["Time_us"] <= upper)]

    df_cleaned = df.groupby(["Hostname", "Operation", "Input"], group_keys=False).apply(remove_outliers_group)

    final_rows = len(df_cleaned)
    logger.info(f"Outliers cleaned: {original_rows} -> {final_rows} rows ({((original_rows - final_rows) / original_rows) * 100:.2f}% removed)")
    return df_cleaned

def summarize(df):
    """Median latency per operand and the max/min spread per operation."""
    stats = df.groupby(["Hostname", "Operation", "Input"]).agg(
        median_us=("Time_us", "median"),
        mean_us=("Time_us", "mean"),
        std_us=("Time_us", "std"),
        count=("Time_us", "count"),
    ).reset_index()

    print("\n--- Latency per Operand ---")
    print(tabulate(stats, headers='keys', tablefmt='pipe', floatfmt=".3f", showindex=False))

    spread = stats.groupby(["Hostname", "Operation"]).agg(
        fastest_us=("median_us", "min"),
        slowest_us=("median_us", "max"),
    ).reset_index()
    spread["Spread"] = spread["slowest_us"] / spread["fastest_us"]

    print("\n--- Median Spread per Operation (1.0 = identical) ---")
    print(tabulate(spread, headers='keys', tablefmt='pipe', floatfmt=".3f", showindex=False))
    return stats, spread

def plot_latency(stats):
    """Generates one bar plot of median latency per operand for each operation."""
    os.makedirs(PLOTS_OUTPUT_DIR, exist_ok=True)
    for op, group in stats.groupby("Operation"):
        plt.figure(figsize=(10, 6))
        ax = sns.barplot(data=group, x="Input", y="median_us", hue="Hostname")
        ax.set_title(f"Median Latency: {op}", fontsize=16)
        ax.set_ylabel("Median Time (us)")
        plt.tight_layout()
        plt.savefig(os.path.join(PLOTS_OUTPUT_DIR, f"latency_{op}.png"), dpi=150)
        plt.close()

if __name__ == "__main__":
    df_raw = load_and_prepare_data(CSV_FILE_PATH)
    if df_raw is not None:
        df_clean = clean_outliers_iqr(df_raw)
        stats_df, _ = summarize(df_clean)
        plot_latency(stats_df)
        logger.info(f"Analysis complete. Plots saved in '{PLOTS_OUTPUT_DIR}'")
