import csv

import pytest

from fibheap import FibonacciHeap
from fibheap import benchmark


def test_run_benchmarks_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    rows = benchmark.run_benchmarks(str(out), base_input=4, steps=2, iterations=2)

    with open(out, newline="") as f:
        written = list(csv.reader(f))

    assert written[0] == benchmark.CSV_HEADER
    assert len(written) == 1 + len(benchmark.OPERATIONS) * 2
    assert [r[1] for r in written[1:]] == [r[1] for r in rows]
    assert {int(r[0]) for r in written[1:]} == {4, 8}
    assert "Benchmark completed" in capsys.readouterr().out


def test_main_runs_selected_ops(tmp_path):
    out = tmp_path / "push.csv"
    rows = benchmark.main(["--output", str(out), "--base-input", "2", "--steps", "1",
                           "--iterations", "1", "--ops", "push", "merge", "--seed", "3"])
    assert [r[1] for r in rows] == ["push", "merge"]
    assert all(r[3] == "0.000" for r in rows)  # single iteration has no spread


def test_main_rejects_non_positive_sizes(tmp_path):
    with pytest.raises(SystemExit):
        benchmark.main(["--output", str(tmp_path / "x.csv"), "--steps", "0"])


def test_heap_space_grows_with_size():
    small = benchmark.measure_heap_space(FibonacciHeap(range(10)))
    large = benchmark.measure_heap_space(FibonacciHeap(range(1000)))
    assert large > small > 0


def test_bench_operations_leave_consistent_heaps():
    data = benchmark.generate_random_list(64)
    assert len(benchmark.bench_push(data)) == 64
    assert len(benchmark.bench_bulk(data)) == 64
    assert len(benchmark.bench_pop(data)) == 0
    merged = benchmark.bench_merge(data)
    assert len(merged) == 63
    assert merged._validate()
