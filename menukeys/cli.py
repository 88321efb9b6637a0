import argparse
import sys
import json
from pathlib import Path

from menukeys.config import SolveConfig
from menukeys.sat_manager import SATManager
from menukeys.solution.types import Assignment
from menukeys.core.errors import MnemonicError

# Menu solved when no labels are given
DEFAULT_OPTIONS = ["undo", "copy", "mod"]


def build_config(args) -> SolveConfig:
    config = SolveConfig.from_env_or_file()
    if args.backend:
        config.backend = args.backend
    if args.solver:
        config.solver_name = args.solver
    if args.no_cross_entry:
        config.enforce_cross_entry_uniqueness = False
    return config


def handle_solve(args) -> int:
    labels = args.labels or DEFAULT_OPTIONS
    manager = SATManager(build_config(args))

    if args.emit:
        Path(args.emit).write_text(manager.generate_code(labels))
        print(f"Wrote solver input to {args.emit}", file=sys.stderr)

    result = manager.solve(labels)

    if args.json:
        print(json.dumps(result.serialize(), indent=2))
    elif isinstance(result, Assignment):
        print("---- Result: option [mnemonic] ----")
        for label, mnemonic in result.pairs():
            print(f"{label} {mnemonic}")
    else:
        print("No mnemonic assignment exists.")

    return 0 if result.is_valid else 1


def main():
    parser = argparse.ArgumentParser(description="menukeys - assign unique keyboard mnemonics to menu entries.")
    parser.add_argument("labels", nargs="*", help=f"Menu entry labels (default: {' '.join(DEFAULT_OPTIONS)}).")
    parser.add_argument("--backend", type=str, help="Solver backend: pysat or z3.")
    parser.add_argument("--solver", type=str, help="PySAT engine name, e.g. g3, m22, cadical153.")
    parser.add_argument("--no-cross-entry", action="store_true", help="Allow the same character on several entries.")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("--emit", type=str, help="Write the generated solver input (DIMACS or SMT-LIB) to this path.")

    args = parser.parse_args()

    try:
        code = handle_solve(args)
    except MnemonicError as e:
        print(f"Error: {e}")
        sys.exit(2)
    sys.exit(code)


if __name__ == "__main__":
    main()
