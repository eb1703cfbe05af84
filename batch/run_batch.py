#!/usr/bin/env python3
"""
Groebner Batch Runner
=====================

Processes a queue of polynomial systems, computing the basis of each and
saving results as JSON. A job that fails (division error, iteration
ceiling, bad configuration) is recorded with its error and the queue moves
on; only that job is lost.

Usage:
    python batch/run_batch.py              # process pending jobs
    python batch/run_batch.py --reset      # clear state and restart

Ctrl+C to stop cleanly between jobs.
"""

import os
import sys
import json
import time
import signal
import argparse

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from batch.config import DEFAULT_CONFIG, DEFAULT_MODULUS, JOB_QUEUE
from groebner_basis.basis import BasisResult, GroebnerEngine
from groebner_basis.errors import GroebnerError
from groebner_basis.families import build_system


# --- Paths ---

STATE_FILE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "state.json")
RESULTS_DIR = os.path.join(PROJECT_ROOT, "results")


# --- State management ---

def load_state(path=STATE_FILE):
    if os.path.exists(path):
        with open(path) as f:
            return json.load(f)
    return {"completed": [], "failed": {}, "current": None, "started_at": None}


def save_state(state, path=STATE_FILE):
    with open(path, "w") as f:
        json.dump(state, f, indent=2)


def result_path(results_dir, job_name):
    safe_name = job_name.replace("(", "_").replace(")", "")
    return os.path.join(results_dir, f"{safe_name}.json")


# --- Main runner ---

class BatchRunner:
    """Process basis jobs from a queue, one at a time."""

    def __init__(self, config=None, jobs=None, modulus=DEFAULT_MODULUS,
                 state_file=STATE_FILE, results_dir=RESULTS_DIR,
                 install_signals=True):
        self.config = config or DEFAULT_CONFIG
        self.engine = GroebnerEngine(self.config)
        self.jobs = list(JOB_QUEUE if jobs is None else jobs)
        self.modulus = modulus
        self.state_file = state_file
        self.results_dir = results_dir
        self.state = load_state(state_file)
        self.state.setdefault("failed", {})
        self.stop_requested = False

        if install_signals:
            signal.signal(signal.SIGINT, self._handle_signal)
            signal.signal(signal.SIGTERM, self._handle_signal)

    def _handle_signal(self, signum, frame):
        print("\n>>> Stop requested. Finishing current job...")
        self.stop_requested = True

    def run_job(self, job):
        """Run one job; GroebnerError becomes a failed BasisResult."""
        job_name, builder, n, coeff_kind, exp_kind, order = job
        try:
            system = build_system(builder, n, coeff_kind, exp_kind, order, self.modulus)
            system.name = job_name
            return self.engine.run(system)
        except GroebnerError as e:
            return BasisResult(
                system=job_name, order=str(order), coefficient_type=coeff_kind,
                exponent_type=exp_kind, num_vars=0,
                error="{}: {}".format(type(e).__name__, e))

    def run(self):
        """Process all pending jobs; returns the list of BasisResults."""
        os.makedirs(self.results_dir, exist_ok=True)

        completed = set(self.state.get("completed", []))
        pending = [job for job in self.jobs if job[0] not in completed]

        if not pending:
            print("All jobs completed!")
            return []

        print("=== Groebner Batch Runner ===")
        print(f"Jobs: {len(pending)} pending, {len(completed)} completed")
        print(f"Results dir: {self.results_dir}")
        print()

        results = []
        for job in pending:
            if self.stop_requested:
                print("Stopped by user.")
                break

            job_name = job[0]
            print(f"--- Job: {job_name} ---")
            self.state["current"] = job_name
            self.state["started_at"] = time.strftime("%Y-%m-%d %H:%M:%S")
            save_state(self.state, self.state_file)

            result = self.run_job(job)
            results.append(result)
            path = result_path(self.results_dir, job_name)
            result.save(path)

            if result.ok:
                print(f"  Basis: {len(result.basis)} elements, "
                      f"{result.passes} passes")
                print(f"  Saved: {path}")
                self.state["completed"].append(job_name)
                self.state["failed"].pop(job_name, None)
            else:
                print(f"  ERROR: {result.error}")
                self.state["failed"][job_name] = result.error
            self.state["current"] = None
            save_state(self.state, self.state_file)

        print("\n=== Done ===")
        done = self.state.get("completed", [])
        print(f"Completed: {len(done)}/{len(self.jobs)}, "
              f"failed: {len(self.state['failed'])}")
        return results


# --- Entry point ---

def main(argv=None):
    parser = argparse.ArgumentParser(description="Groebner Batch Runner")
    parser.add_argument("--reset", action="store_true",
                        help="Reset state and start from scratch")
    parser.add_argument("--modulus", type=int, default=DEFAULT_MODULUS,
                        help="modulus for Z/pZ jobs")
    args = parser.parse_args(argv)

    if args.reset:
        if os.path.exists(STATE_FILE):
            os.remove(STATE_FILE)
        print("State reset.")

    runner = BatchRunner(modulus=args.modulus)
    runner.run()


if __name__ == "__main__":
    main()
