#!/usr/bin/env python3

import argparse
import subprocess
import sys
import time
import statistics
import numpy as np
from pathlib import Path

from exercises.fibonacci.fibonacci import fib

# --- Configuration ---
FIBONACCI_SCRIPT = Path(__file__).parent / "exercises" / "fibonacci" / "fibonacci.py"
BATCH_RUNS = 100  # Number of times to run the script
TIME_THRESHOLD = 1.0  # Seconds - a slower first run is not repeated
GROWTH_START = 15  # First index of the in-process growth profile
GROWTH_END = 27    # Last index, inclusive
GROWTH_REPEATS = 3  # Best of N timings per index
GOLDEN_RATIO = (1 + 5 ** 0.5) / 2

# --- Colors (ANSI escape codes) ---
GREEN = '\033[0;32m'
BLUE = '\033[0;34m'
YELLOW = '\033[1;33m'
RED = '\033[0;31m'
MAGENTA = '\033[0;35m'  # For single-run markers
NC = '\033[0m' # No Color

# Box drawing characters
T_DOWN = '┬'
T_UP = '┴'
V = '│'
L_HORZ = '─'
C_TL = '┌'
C_TR = '┐'
C_BL = '└'
C_BR = '┘'
L_LEFT = '├'
L_RIGHT = '┤'
C_CR = '┼'

def print_color(color, text):
    """Prints text in the specified color."""
    print(f"{color}{text}{NC}")

def run_command(command, cwd=None):
    """Runs a command using subprocess, returns the CompletedProcess or None if it could not start."""
    command_str_list = [str(item) for item in command]
    try:
        result = subprocess.run(command_str_list, capture_output=True, text=True, cwd=cwd)
    except OSError as e:
        print_color(RED, f"Error: could not run {command_str_list[0]}: {e}")
        return None
    if result.returncode != 0 and result.stderr:
        print_color(RED, f"Stderr: {result.stderr.strip()}")
    return result

def remove_outliers(times):
    """Split times into (clean, outliers) using the IQR method."""
    q1 = np.percentile(times, 25)
    q3 = np.percentile(times, 75)
    iqr = q3 - q1
    lower_bound = q1 - 1.5 * iqr
    upper_bound = q3 + 1.5 * iqr
    outliers = [t for t in times if t < lower_bound or t > upper_bound]
    clean = [t for t in times if lower_bound <= t <= upper_bound]
    return clean, outliers

def summarize_times(times):
    """Return min/median/avg/p95 of a list of run times."""
    p95 = np.percentile(times, 95) if len(times) > 5 else max(times)
    return {
        'min': min(times),
        'med': statistics.median(times),
        'avg': sum(times) / len(times),
        'p95': float(p95),
    }

def run_script_batch(command_list, runs=BATCH_RUNS, cwd=None):
    """Runs and times a command repeatedly.
    Only one run is made if the first one exceeds TIME_THRESHOLD.

    Returns a dict with 'time' (average, None on failure), 'exit_code',
    'single_run', 'times' and 'outliers'."""
    print_color(GREEN, f"\n--- Running Fibonacci script batch ---")

    times = []
    for run in range(1, runs + 1):
        start_time = time.perf_counter()
        result = run_command(command_list, cwd=cwd)
        run_time = time.perf_counter() - start_time

        if result is None or result.returncode != 0:
            exit_code = -1 if result is None else result.returncode
            print_color(RED, f"Script failed on run {run} with Exit Code: {exit_code}")
            if not times:
                return {'time': None, 'exit_code': exit_code, 'single_run': True, 'times': [], 'outliers': 0}
            # Earlier runs still count
            break

        times.append(run_time)
        if run == 1 and run_time > TIME_THRESHOLD:
            print_color(MAGENTA, f"First run took {run_time:.4f}s > {TIME_THRESHOLD}s threshold, skipping additional runs.")
            return {'time': run_time, 'exit_code': 0, 'single_run': True, 'times': times, 'outliers': 0}

    if not times:
        print_color(RED, "No successful runs")
        return {'time': None, 'exit_code': -1, 'single_run': True, 'times': [], 'outliers': 0}

    outliers = []
    if len(times) >= 10:
        clean, outliers = remove_outliers(times)
        if outliers:
            print_color(YELLOW, f"Detected {len(outliers)} outliers: {[f'{o:.4f}' for o in outliers]}")
            times = clean

    stats = summarize_times(times)
    print_color(YELLOW, f"Times (seconds): Min: {stats['min']:.4f}, Med: {stats['med']:.4f}, Avg: {stats['avg']:.4f}, P95: {stats['p95']:.4f}")
    return {'time': stats['avg'], 'exit_code': 0, 'single_run': len(times) == 1, 'times': times, 'outliers': len(outliers)}

def time_fib(index, repeats=GROWTH_REPEATS):
    """Best-of-N wall time of one naive fib(index) call, returns (seconds, value)."""
    best = None
    value = None
    for _ in range(repeats):
        start_time = time.perf_counter()
        value = fib(index)
        elapsed = time.perf_counter() - start_time
        if best is None or elapsed < best:
            best = elapsed
    return best, value

def profile_growth(start=GROWTH_START, end=GROWTH_END):
    """Times fib(n) for each n in [start, end].

    Each row carries the value, the number of calls the naive recursion makes
    (2 * fib(n) - 1) and the time ratio to the previous index.
    """
    rows = []
    previous = None
    for index in range(start, end + 1):
        elapsed, value = time_fib(index)
        ratio = elapsed / previous if previous and elapsed else None
        rows.append({
            'index': index,
            'value': value,
            'calls': 2 * value - 1,
            'time': elapsed,
            'ratio': ratio,
        })
        previous = elapsed
    return rows

def growth_factor(rows):
    """Per-index growth of fib run time, from a log-linear fit of the timings."""
    # A coarse clock can report 0.0 for small indices
    timed = [row for row in rows if row['time'] > 0]
    if len(timed) < 2:
        return None
    indices = np.array([row['index'] for row in timed], dtype=float)
    times = np.array([row['time'] for row in timed], dtype=float)
    slope, _ = np.polyfit(indices, np.log(times), 1)
    return float(np.exp(slope))

def print_growth_table(rows):
    col_index_width = 7
    col_value_width = 10
    col_calls_width = 12
    col_time_width = 12
    col_ratio_width = 8
    widths = [col_index_width, col_value_width, col_calls_width, col_time_width, col_ratio_width]
    total_width = sum(w + 2 for w in widths) + len(widths) - 1

    print(f"{C_TL}{L_HORZ*total_width}{C_TR}")
    print(f"{V}{'Naive Recursive Fibonacci Growth Profile':^{total_width}}{V}")
    print(L_LEFT + T_DOWN.join(L_HORZ * (w + 2) for w in widths) + L_RIGHT)
    print(f"{V} {'Index':<{col_index_width}} {V} {'Value':<{col_value_width}} {V} {'Calls':<{col_calls_width}} {V} {'Time (s)':<{col_time_width}} {V} {'Ratio':<{col_ratio_width}} {V}")
    print(L_LEFT + C_CR.join(L_HORZ * (w + 2) for w in widths) + L_RIGHT)

    for row in rows:
        ratio_str = f"{row['ratio']:.2f}x" if row['ratio'] is not None else "N/A"
        print(f"{V} {row['index']:>{col_index_width}} {V} {row['value']:>{col_value_width}} {V} {row['calls']:>{col_calls_width}} {V} {row['time']:>{col_time_width}.6f} {V} {ratio_str:>{col_ratio_width}} {V}")

    print(C_BL + T_UP.join(L_HORZ * (w + 2) for w in widths) + C_BR)

def main(argv=None):
    """Main function to run the timing steps, returns the exit status."""
    parser = argparse.ArgumentParser(description='Naive recursive Fibonacci timing harness')
    parser.add_argument('--runs', type=int, default=BATCH_RUNS, help='Script runs in the batch')
    parser.add_argument('--start', type=int, default=GROWTH_START, help='First index of the growth profile')
    parser.add_argument('--end', type=int, default=GROWTH_END, help='Last index of the growth profile')
    args = parser.parse_args(argv)

    if args.runs < 1:
        parser.error("--runs must be at least 1")
    if args.start < 1 or args.end < args.start:
        parser.error("growth profile needs 1 <= start <= end")

    print("===== Naive Recursive Fibonacci Benchmark =====")

    if not FIBONACCI_SCRIPT.exists():
        print_color(RED, f"Fibonacci script not found: {FIBONACCI_SCRIPT}")
        return 1

    batch = run_script_batch([sys.executable, FIBONACCI_SCRIPT], runs=args.runs)

    print_color(GREEN, f"\n--- Profiling fib({args.start})..fib({args.end}) in-process ---")
    rows = profile_growth(args.start, args.end)

    # --- Summary ---
    print_color(BLUE, "===== Benchmark Summary =====")
    if batch['time'] is None:
        print_color(RED, f"Script batch FAILED (Exit: {batch['exit_code']})")
    else:
        marker = "*" if batch['single_run'] else ("†" if batch['outliers'] else "")
        print(f"Script average over {len(batch['times'])} runs: {batch['time']:.4f}s{marker}")

    print_growth_table(rows)

    factor = growth_factor(rows)
    if factor is not None:
        ratios = [row['ratio'] for row in rows if row['ratio']]
        median_ratio = f"{statistics.median(ratios):.3f}x" if ratios else "N/A"
        print(f"Median step ratio: {median_ratio}, fitted growth: {factor:.3f}x per index (golden ratio {GOLDEN_RATIO:.3f})")

    print(f"* script only ran once due to exceeding the {TIME_THRESHOLD}s threshold")
    print(f"† Statistical outliers were detected and removed using IQR method")

    print_color(BLUE, "===== Benchmark Complete =====")
    return 0 if batch['time'] is not None else 1

if __name__ == "__main__":
    sys.exit(main())
