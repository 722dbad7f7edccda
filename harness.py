# harness.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import inf
from time import perf_counter
from typing import Iterable, Iterator, List, Optional
import multiprocessing as mp

from metrics import BenchmarkRecord, GlobalBest, compute_speedup
from model import Tour
from solvers.base import TSPSolver
from trial import Trial, TrialResult, derive_seeds, run_trial


class HarnessState(Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    AWAITING_COMPLETION = "awaiting_completion"
    AGGREGATING = "aggregating"
    DONE = "done"


@dataclass
class BatchResult:
    """Outcome of one batch of trials on a fixed worker-pool size."""
    algorithm: str
    workers: int
    duration_ms: float
    tours: List[Tour] = field(default_factory=list)
    failures: int = 0

    @property
    def best(self) -> Optional[Tour]:
        if not self.tours:
            return None
        return min(self.tours, key=lambda t: t.distance)

    @property
    def best_distance(self) -> float:
        best = self.best
        return best.distance if best is not None else inf


def normalize_worker_counts(worker_counts: Iterable[int]) -> List[int]:
    """
    Deduplicate and sort worker counts, making sure the single-worker
    baseline comes first.
    """
    counts = sorted(set(int(w) for w in worker_counts))
    for w in counts:
        if w < 1:
            raise ValueError(f"worker counts must be >= 1, got {w}")
    if not counts or counts[0] != 1:
        counts.insert(0, 1)
    return counts


@dataclass
class TrialHarness:
    """
    Runs batches of independent trials on a process pool.

    One batch goes through:
      IDLE -> DISPATCHING -> AWAITING_COMPLETION -> AGGREGATING -> DONE
    """
    trials_per_batch: int = 16

    # control terminal logging
    log_events: bool = False

    state: HarnessState = HarnessState.IDLE

    def __post_init__(self) -> None:
        if self.trials_per_batch < 1:
            raise ValueError("trials_per_batch must be >= 1")

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    def _set_state(self, state: HarnessState) -> None:
        self.state = state
        self._log(f"    [STATE] {state.value}")

    # ---------------- one batch ---------------- #

    def run_batch(
        self,
        base_tour: Tour,
        algorithm: TSPSolver,
        workers: int,
        base_seed: Optional[int] = None,
    ) -> BatchResult:
        """
        Run `trials_per_batch` trials of `algorithm` on a pool of `workers`
        processes and block until every trial has finished or failed.

        The clock starts once the pool is up and stops after the last
        result arrives. Failed trials are logged and counted, never raised.
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        self._set_state(HarnessState.IDLE)
        seeds = derive_seeds(self.trials_per_batch, base_seed)
        trials = [Trial(algorithm=algorithm, seed=s, base_tour=base_tour) for s in seeds]

        results: List[TrialResult] = []
        failures = 0

        with mp.Pool(processes=workers) as pool:
            self._set_state(HarnessState.DISPATCHING)
            t0 = perf_counter()
            pending = [pool.apply_async(run_trial, (t,)) for t in trials]

            self._set_state(HarnessState.AWAITING_COMPLETION)
            for trial, job in zip(trials, pending):
                try:
                    res = job.get()
                except Exception as e:
                    print(f"[ERROR] trial seed={trial.seed} ({algorithm.name}) did not complete: {e}")
                    res = None

                if res is None:
                    failures += 1
                    continue
                results.append(res)

            duration_ms = (perf_counter() - t0) * 1000.0

        self._set_state(HarnessState.AGGREGATING)
        batch = BatchResult(
            algorithm=algorithm.name,
            workers=workers,
            duration_ms=duration_ms,
            tours=[r.tour for r in results],
            failures=failures,
        )
        if failures:
            print(
                f"[WARN] {failures}/{len(trials)} trials failed for "
                f"{algorithm.name} with {workers} workers"
            )
        self._set_state(HarnessState.DONE)
        return batch

    # ---------------- worker-count sweep ---------------- #

    def sweep(
        self,
        dataset_name: str,
        base_tour: Tour,
        algorithm: TSPSolver,
        worker_counts: Iterable[int],
        global_best: GlobalBest,
        base_seed: Optional[int] = None,
    ) -> Iterator[BenchmarkRecord]:
        """
        Yield one BenchmarkRecord per worker count for a single algorithm.

        The single-worker batch always runs first; its duration is the
        baseline for every speedup in this sweep. Each batch's best tour
        is offered to `global_best`.
        """
        baseline_ms = 0.0

        for idx, workers in enumerate(normalize_worker_counts(worker_counts)):
            seed = None if base_seed is None else base_seed + idx * self.trials_per_batch
            batch = self.run_batch(base_tour, algorithm, workers, seed)

            if workers == 1:
                baseline_ms = batch.duration_ms
            speedup = compute_speedup(baseline_ms, batch.duration_ms)

            best = batch.best
            if best is not None and global_best.offer(best, algorithm.name, workers, batch.duration_ms):
                self._log(f"    [BEST] new dataset best {best.distance:.2f} by {algorithm.name}")

            yield BenchmarkRecord(
                dataset=dataset_name,
                algorithm=algorithm.name,
                workers=workers,
                duration_ms=batch.duration_ms,
                speedup=speedup,
                best_distance=batch.best_distance,
            )
