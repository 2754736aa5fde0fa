"""
Benchmark harness for FibonacciHeap.

Times each heap operation at exponentially growing input sizes and writes
the averages to a CSV file, one row per (operation, size) pair.

Usage examples:
    python -m fibheap.benchmark
    python -m fibheap.benchmark --output heap.csv --base-input 1000 --steps 8
    python -m fibheap.benchmark --ops push pop --iterations 3 --verbose
"""

import argparse
import csv
import logging
import random
import statistics
import sys
import time

from .heap import FibonacciHeap

logger = logging.getLogger(__name__)

# Defaults, overridable from the command line
DEFAULT_OUTPUT_CSV = "fibonacci_heap_performance.csv"
DEFAULT_BASE_INPUT = 100
DEFAULT_STEPS = 12
DEFAULT_ITERATIONS = 5
MAX_RANDOM_VALUE = 1000000

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, MAX_RANDOM_VALUE) for _ in range(size)]


def measure_operation_time(operation, input_size: int, iterations: int = DEFAULT_ITERATIONS):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev


def measure_heap_space(heap: FibonacciHeap) -> int:
    """Estimate the memory held by a heap: object, root list, every node and value."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._roots)
    stack = list(heap._roots)
    while stack:
        node = stack.pop()
        total += sys.getsizeof(node) + sys.getsizeof(node.children) + sys.getsizeof(node.value)
        stack.extend(node.children)
    return total


def measure_space_efficiency(operation, input_size: int, iterations: int = 3):
    """Return average memory left in the heap after the operation (bytes)."""
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        heap = operation(data)
        sizes.append(measure_heap_space(heap))
    return statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data):
    heap = FibonacciHeap()
    for item in data:
        heap.push(item)
    return heap


def bench_bulk(data):
    return FibonacciHeap(data)


def bench_pop(data):
    heap = FibonacciHeap(data)
    while heap:
        heap.pop()
    return heap


def bench_peek(data):
    heap = FibonacciHeap(data)
    for _ in range(min(3, len(data))):
        heap.peek()
    return heap


def bench_merge(data):
    half = len(data) // 2
    heap = FibonacciHeap(data[:half])
    heap.merge(FibonacciHeap(data[half:]))
    # the first pop after a merge pays for consolidating both forests
    heap.pop()
    return heap


OPERATIONS = {
    "push": bench_push,
    "bulk": bench_bulk,
    "pop": bench_pop,
    "peek": bench_peek,
    "merge": bench_merge,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = DEFAULT_BASE_INPUT,
                   steps: int = DEFAULT_STEPS, iterations: int = DEFAULT_ITERATIONS,
                   ops=None):
    """Run exponential performance tests and write the results to *output_file*.

    Returns the rows written (header excluded).
    """
    names = ops or list(OPERATIONS)
    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name in names:
            op_func = OPERATIONS[op_name]
            for size in input_sizes:
                logger.debug("benchmarking %s at size %d", op_name, size)
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                avg_space = measure_space_efficiency(op_func, size)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<10} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | "
                      f"Std: {std_time:.3f} ms | Avg Space: {avg_space:.0f} bytes")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows


# -------------------------------------------------------------------
# Argument parser
# -------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(description="Benchmark FibonacciHeap operations")
    p.add_argument("--output", default=DEFAULT_OUTPUT_CSV, help="CSV file to write")
    p.add_argument("--base-input", type=int, default=DEFAULT_BASE_INPUT,
                   help="Smallest input size; doubled at every step")
    p.add_argument("--steps", type=int, default=DEFAULT_STEPS, help="Number of input sizes")
    p.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS,
                   help="Timed runs per (operation, size)")
    p.add_argument("--ops", nargs="+", choices=sorted(OPERATIONS), help="Operations to run (default: all)")
    p.add_argument("--seed", type=int, help="Seed the random input generator")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m fibheap.benchmark`."""
    argv = argv if argv is not None else sys.argv[1:]
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.base_input < 1 or args.steps < 1 or args.iterations < 1:
        build_parser().error("--base-input, --steps and --iterations must be positive")
    if args.seed is not None:
        random.seed(args.seed)
    return run_benchmarks(args.output, args.base_input, args.steps, args.iterations, args.ops)


if __name__ == "__main__":
    main()
