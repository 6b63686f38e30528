import argparse
from typing import List, Optional

from .console import check_lp, load_lp, print_solution, print_status, print_tableau, read_lp
from .simplex import Status, solve


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Tableau Simplex with slack variables (shows iterations)")
    p.add_argument("json", nargs="?", help="Path to JSON file describing the LP (prompts for it when omitted)")
    p.add_argument("--exact", action="store_true", help="Exact rational arithmetic instead of floats")
    p.add_argument("--no-verbose", action="store_true", help="Hide iteration printouts")
    p.add_argument("--graph", action="store_true", help="Plot constraints and iso-profit (2 variables only)")
    args = p.parse_args(argv)

    try:
        lp = load_lp(args.json) if args.json else read_lp(exact=args.exact)
        check_lp(lp)
    except EOFError:
        p.error("unexpected end of input")
    except (OSError, ValueError) as e:
        p.error(str(e))

    res = solve(lp, exact=args.exact, on_iteration=None if args.no_verbose else print_tableau)

    print_status(Status(res.status))
    if res.status == "unbounded":
        return 1
    print_solution(res.solution, res.optimal_value)
    print("Iterations:", res.iterations)
    if res.alternate_optimal:
        print("Note: Infinite many optimal solutions (alternate optimal).")

    if args.graph:
        if len(lp.c) != 2:
            print("Graph only supports 2 variables.")
        else:
            from .graph import plot_2d
            import matplotlib.pyplot as plt

            if plot_2d(lp, res) is None:
                print("No feasible region to plot (empty or numerical issues).")
            else:
                plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
