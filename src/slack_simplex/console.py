"""Terminal input and output around the solver: prompts, JSON models, printers."""

import json
from decimal import Decimal
from fractions import Fraction
from typing import Callable, Iterator, List, Optional

from .simplex import LP, Num, Simplex, Status, fmt_out


class _Tokens:
    # Whitespace separated tokens across lines, like reading numbers from a stream:
    # the prompt is only shown when the current line has been used up.
    def __init__(self, input_fn: Callable[[str], str]):
        self.input_fn = input_fn
        self.pending: Iterator[str] = iter(())

    def next(self, prompt: str = "") -> str:
        while True:
            tok = next(self.pending, None)
            if tok is not None:
                return tok
            self.pending = iter(self.input_fn(prompt).split())


def parse_number(token: str, exact: bool = False) -> Num:
    try:
        return Fraction(token) if exact else float(token)
    except (ValueError, ZeroDivisionError):
        raise ValueError(f"not a number: {token!r}") from None


def parse_count(token: str, what: str) -> int:
    try:
        count = int(token)
    except ValueError:
        raise ValueError(f"number of {what} must be an integer, got {token!r}") from None
    if count < 1:
        raise ValueError(f"number of {what} must be positive, got {count}")
    return count


def read_lp(input_fn: Optional[Callable[[str], str]] = None,
            output_fn: Optional[Callable[[str], None]] = None,
            exact: bool = False) -> LP:
    """Prompt for n, m, the objective and every constraint row with its RHS."""
    input_fn = input_fn or input
    output_fn = output_fn or print
    tokens = _Tokens(input_fn)

    n = parse_count(tokens.next("Enter number of variables: "), "variables")
    m = parse_count(tokens.next("Enter number of constraints: "), "constraints")

    prompt = "Enter the coefficients of the objective function (c1, c2, ..., cn): "
    c = [parse_number(tokens.next(prompt), exact) for _ in range(n)]

    output_fn("Enter the coefficients of the constraint equations:")
    A: List[List[Num]] = []
    b: List[Num] = []
    for i in range(1, m + 1):
        output_fn(f"For constraint {i}:")
        A.append([parse_number(tokens.next(), exact) for _ in range(n)])
        b.append(parse_number(tokens.next(f"Enter the right-hand side (b{i}): "), exact))
    return LP(c=c, A=A, b=b)


def load_lp(path: str) -> LP:
    """Read {"c": [...], "A": [[...]], "b": [...]} from a JSON file.

    Files written for the Big-M / two-phase solvers are accepted as long as every
    sense is "<=" and the objective is a maximization.
    """
    with open(path, "r") as f:
        # Parse floats as Decimal so exact mode gets 0.1 and not its binary neighbour
        cfg = json.load(f, parse_float=Decimal)
    return lp_from_dict(cfg)


def lp_from_dict(cfg: dict) -> LP:
    if not isinstance(cfg, dict):
        raise ValueError("model must be a JSON object with c, A and b")
    try:
        lp = LP(c=list(cfg["c"]), A=[list(row) for row in cfg["A"]], b=list(cfg["b"]))
    except KeyError as e:
        raise ValueError(f"model is missing field {e}") from None
    except TypeError:
        raise ValueError("c and b must be lists of numbers, A a list of rows") from None
    senses = cfg.get("senses")
    if senses is not None and any(s != "<=" for s in senses):
        raise ValueError("only <= constraints are supported")
    if not cfg.get("maximize", True):
        raise ValueError("only maximization problems are supported")
    return lp


def _check_numbers(values, what: str):
    for j, v in enumerate(values, start=1):
        if isinstance(v, bool) or not isinstance(v, (int, float, Fraction, Decimal)):
            raise ValueError(f"{what}{j} is not a number: {v!r}")


def check_lp(lp: LP):
    """Reject shapes the tableau cannot be built from and negative RHS values.

    The solver itself does not validate its input; this is for the front ends.
    """
    _check_numbers(lp.c, "objective coefficient c")
    for i, row in enumerate(lp.A, start=1):
        _check_numbers(row, f"coefficient of constraint {i}, column ")
    _check_numbers(lp.b, "right-hand side b")

    n, m = len(lp.c), len(lp.A)
    if n == 0:
        raise ValueError("objective has no coefficients")
    if m == 0:
        raise ValueError("at least one constraint is required")
    if len(lp.b) != m:
        raise ValueError(f"expected {m} right-hand sides, got {len(lp.b)}")
    for i, row in enumerate(lp.A, start=1):
        if len(row) != n:
            raise ValueError(f"constraint {i} has {len(row)} coefficients, expected {n}")
    for i, b_i in enumerate(lp.b, start=1):
        if b_i < 0:
            raise ValueError(f"right-hand side b{i} = {b_i} is negative; "
                             "the slack basis needs b >= 0")


def print_tableau(tab: Simplex, output_fn: Optional[Callable[[str], None]] = None):
    output_fn = output_fn or print
    output_fn("\nCurrent Tableau:")
    for line in tab.format_tableau():
        output_fn(line)


def print_status(status: Status, output_fn: Optional[Callable[[str], None]] = None):
    output_fn = output_fn or print
    if status is Status.OPTIMAL:
        output_fn("Optimal solution found.")
    elif status is Status.UNBOUNDED:
        output_fn("The problem is unbounded.")


def print_solution(values: List[Num], optimal_value: Num,
                   output_fn: Optional[Callable[[str], None]] = None):
    output_fn = output_fn or print
    output_fn("\nOptimal Solution:")
    for j, v in enumerate(values, start=1):
        output_fn(f"x{j} = {fmt_out(v)}")
    output_fn(f"Maximum Value of Objective Function: {fmt_out(optimal_value)}")
