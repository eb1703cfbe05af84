"""
Run all verification scripts for the Groebner basis package.

Each script is a self-contained check that outputs PASS/FAIL and exits
non-zero on failure. Unit tests live next to this file and run under
pytest.
"""

import subprocess
import sys
import os
import time

VERIFICATION_SCRIPTS = [
    ("01_properties.py", "Structural Properties"),
    ("02_scenarios.py", "Reference Scenarios"),
]


def run_script(path, name):
    """Run a Python script and capture output."""
    print("\n" + "=" * 60)
    print("RUNNING: {}".format(name))
    print("=" * 60)

    t0 = time.time()
    result = subprocess.run(
        [sys.executable, path],
        capture_output=True, text=True, timeout=600
    )
    elapsed = time.time() - t0

    print(result.stdout)
    if result.stderr:
        print("STDERR:", result.stderr[:500])

    passed = result.returncode == 0
    return passed, elapsed


def run_all(base=None):
    base = base or os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    verification_dir = os.path.join(base, "verification")

    results = []
    for filename, name in VERIFICATION_SCRIPTS:
        path = os.path.join(verification_dir, filename)
        if os.path.exists(path):
            try:
                passed, elapsed = run_script(path, name)
                results.append((name, passed, elapsed))
            except subprocess.TimeoutExpired:
                print("  TIMEOUT after 600s")
                results.append((name, False, 600))
        else:
            print("  FILE NOT FOUND: {}".format(path))
            results.append((name, False, 0))
    return results


if __name__ == "__main__":
    results = run_all()

    # Summary
    print("\n\n" + "=" * 60)
    print("TEST SUMMARY")
    print("=" * 60)
    print()
    all_pass = True
    for name, passed, elapsed in results:
        status = "PASS" if passed else "FAIL"
        if not passed:
            all_pass = False
        print("  [{}] {} ({:.1f}s)".format(status, name, elapsed))

    print()
    if all_pass:
        print("ALL TESTS PASSED")
    else:
        print("SOME TESTS FAILED")
    print("=" * 60)
    sys.exit(0 if all_pass else 1)
