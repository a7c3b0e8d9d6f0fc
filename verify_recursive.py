#!/usr/bin/env python3
"""
Recursive exercise determinism check
Runs each recursive exercise several times and compares every run with its
expected output to catch wrong or non-deterministic results.
"""

import argparse
import sys
from collections import Counter

from run_tests import EXERCISES_DIR, PROJECT_ROOT, load_expected_output, run_command

DEFAULT_RUNS = 10

# Exercises built on recursion, relative to the exercises directory
RECURSIVE_EXERCISES = [
    'fibonacci/fibonacci.py',
]

def classify_runs(results, expected_output):
    """Classify collected run outputs against the expected lines."""
    result_counts = Counter(tuple(result) for result in results)
    if len(result_counts) != 1:
        return "NON_DETERMINISTIC"
    if list(result_counts.most_common(1)[0][0]) == expected_output:
        return "CORRECT"
    return "CONSISTENTLY_WRONG"

def check_recursive_exercise(exercise, expected_output, num_runs=DEFAULT_RUNS):
    """Run an exercise num_runs times, return (status, results)"""
    script = EXERCISES_DIR / exercise
    results = []

    print(f"\n🔄 Testing {exercise}")
    print(f"   Expected: {expected_output}")
    print("=" * 80)

    for i in range(num_runs):
        success, stdout, stderr = run_command([sys.executable, str(script)], cwd=PROJECT_ROOT)
        if not success:
            print(f"❌ Execution failed on run {i+1}: {stderr}")
            return "EXECUTION_ERROR", results

        output_lines = [line.strip() for line in stdout.split('\n') if line.strip()]
        results.append(output_lines)
        print(f"  Run {i+1:2d}: {len(output_lines)} lines, last: {output_lines[-1] if output_lines else ''}")

    print("\n📊 Analysis:")
    print("-" * 50)

    status = classify_runs(results, expected_output)
    if status == "CORRECT":
        print(f"✅ CORRECT: All {num_runs} runs produced the expected result")
    elif status == "CONSISTENTLY_WRONG":
        print(f"❌ CONSISTENTLY WRONG: All {num_runs} runs produced wrong result")
        print(f"   Expected: {expected_output}")
        print(f"   Actual:   {results[0]}")
    else:
        result_counts = Counter(tuple(result) for result in results)
        print(f"❌ NON-DETERMINISTIC: {len(result_counts)} different results detected!")
        for i, (result, count) in enumerate(result_counts.most_common(), 1):
            percentage = (count / num_runs) * 100
            print(f"   Result {i} (appeared {count}/{num_runs} times, {percentage:.1f}%): {list(result)}")

    return status, results

def main(argv=None):
    """Check all recursive exercises, returns the exit status"""
    parser = argparse.ArgumentParser(description='Recursive exercise determinism check')
    parser.add_argument('--runs', type=int, default=DEFAULT_RUNS, help='Runs per exercise')
    args = parser.parse_args(argv)

    print("🧪 RECURSIVE EXERCISE CHECK")
    print("=" * 80)
    print(f"Running each recursive exercise {args.runs} times")

    results_summary = {
        'CORRECT': [],
        'CONSISTENTLY_WRONG': [],
        'NON_DETERMINISTIC': [],
        'EXECUTION_ERROR': []
    }

    for exercise in RECURSIVE_EXERCISES:
        expected_output = load_expected_output(EXERCISES_DIR / exercise)
        if expected_output is None:
            print(f"❌ No expected output for {exercise}")
            results_summary['EXECUTION_ERROR'].append(exercise)
            continue
        status, _ = check_recursive_exercise(exercise, expected_output, args.runs)
        results_summary[status].append(exercise)

    print("\n" + "=" * 80)
    print("📋 SUMMARY")
    print("=" * 80)

    for status, exercises in results_summary.items():
        print(f"\n{status} ({len(exercises)}):")
        for exercise in exercises:
            print(f"   - {exercise}")

    correct = len(results_summary['CORRECT'])
    print(f"\n📊 Overall: {correct}/{len(RECURSIVE_EXERCISES)} exercises are correct")

    if correct != len(RECURSIVE_EXERCISES):
        return 1
    print(f"\n🎉 All recursive exercises are working correctly!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
