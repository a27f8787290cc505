"""
Wildcatter — top-level CLI dispatcher.

Usage:
    python -m wildcatter <command> [args]

Commands:
    estimate           Estimate revenue, cash flow and risk for one asset
                       Usage: python -m wildcatter estimate --inputs-json <path> [options]
    show-benchmarks    Print the benchmark price and lifting cost tables
"""

from __future__ import annotations

import sys


def main() -> None:
    if len(sys.argv) < 2:
        _print_usage()
        sys.exit(0)

    command = sys.argv[1]

    if command == "estimate":
        from wildcatter.asset_estimator.__main__ import main as estimate_main
        estimate_main(sys.argv[2:])
    elif command in ("show-benchmarks", "show_benchmarks"):
        from wildcatter.asset_estimator.__main__ import main as estimate_main
        estimate_main(["--show-benchmarks"])
    else:
        print(f"Unknown command: {command!r}")
        _print_usage()
        sys.exit(1)


def _print_usage() -> None:
    print(__doc__)


if __name__ == "__main__":
    main()
