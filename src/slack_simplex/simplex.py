from __future__ import annotations

"""
Tableau Simplex solver with slack variables.
- Solves: maximize c^T x subject to A x <= b, x >= 0 (b assumed >= 0).
- One slack per constraint gives the starting basis x = 0, s = b.
- Dantzig entering rule (most negative objective-row entry), minimum-ratio
  leaving rule, Gauss-Jordan pivots on a dense tableau.
- Floats by default; exact=True keeps every entry as a Fraction.

Tableau layout ((m+1) x (n+m+1)):
- row 0: [-c1 .. -cn | 0 .. 0 | z]
- row i: [a_i1 .. a_in | e_i | b_i]   (e_i: unit vector of the slack block)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union
import math
from fractions import Fraction
from decimal import Decimal

# --- Exact rational helpers ---
Num = Union[int, float, Fraction, Decimal]

def F(x: Num) -> Fraction:
    """Convert a number to Fraction exactly when possible.
    - Fraction -> as is
    - Decimal -> exact rational
    - int -> exact
    - float -> best rational approx (limit large denominator)
    """
    if isinstance(x, Fraction):
        return x
    if isinstance(x, Decimal):
        return Fraction(x)
    if isinstance(x, int):
        return Fraction(x)
    if isinstance(x, float):
        return Fraction.from_float(x).limit_denominator(10**12)
    # strings like "3/4" or "1.25"
    return Fraction(str(x))

def fmt_out(x: Num) -> str:
    """Pretty-print a final value: integers as integers, Fractions reduced, floats via %g."""
    if x == 0:
        return "0"
    if isinstance(x, (Fraction, int)):
        fr = F(x)
        if fr.denominator == 1:
            return str(fr.numerator)
        return f"{fr.numerator}/{fr.denominator}"
    return f"{float(x):g}"


class Status(Enum):
    ITERATING = "iterating"
    OPTIMAL = "optimal"
    UNBOUNDED = "unbounded"


@dataclass
class LP:
    c: List[Num]
    A: List[List[Num]]
    b: List[Num]


@dataclass
class SimplexResult:
    status: str  # optimal | unbounded
    optimal_value: Optional[Num]
    solution: Optional[List[Num]]  # values for the n decision variables
    iterations: int
    tableaux: List[List[str]] = field(default_factory=list)  # snapshot before each iteration
    pivots: List[Tuple[int, int]] = field(default_factory=list)  # (row, col) per pivot
    path: List[List[Num]] = field(default_factory=list)  # basic solution before each iteration
    alternate_optimal: bool = False


class Simplex:
    def __init__(self, num_variables: int, num_constraints: int, exact: bool = False):
        self.n = num_variables
        self.m = num_constraints
        self.exact = exact
        self.num: Callable[[Num], Num] = F if exact else float
        self.cols = self.n + self.m + 1
        self.rhs = self.n + self.m  # index of the RHS column
        zero = self.num(0)
        self.T = [[zero] * self.cols for _ in range(self.m + 1)]
        self.status = Status.ITERATING
        self.iterations = 0
        self.pivots: List[Tuple[int, int]] = []

    @classmethod
    def from_lp(cls, lp: LP, exact: bool = False) -> "Simplex":
        tab = cls(len(lp.c), len(lp.A), exact=exact)
        tab.set_objective(lp.c)
        for i, (row, b_i) in enumerate(zip(lp.A, lp.b), start=1):
            tab.add_constraint(i, row, b_i)
        return tab

    @property
    def var_names(self) -> List[str]:
        return [f"x{j+1}" for j in range(self.n)] + [f"s{i+1}" for i in range(self.m)]

    def set_objective(self, c: List[Num]):
        # negate (no -0.0)
        for j in range(self.n):
            self.T[0][j] = 0 - self.num(c[j])

    def add_constraint(self, i: int, coeffs: List[Num], rhs: Num):
        """Fill constraint row i (1-based) and its slack column."""
        row = self.T[i]
        for j in range(self.n):
            row[j] = self.num(coeffs[j])
        row[self.rhs] = self.num(rhs)
        row[self.n + i - 1] = self.num(1)

    def format_tableau(self) -> List[str]:
        # right-aligned, two decimals, one trailing space per cell
        return ["".join(f"{float(v):>10.2f} " for v in row) for row in self.T]

    def pivot_column(self) -> Optional[int]:
        """Entering variable: most negative objective-row entry, earliest on ties."""
        obj_row = self.T[0]
        best_j = None
        best_val = self.num(0)
        for j in range(self.n + self.m):
            if obj_row[j] < best_val:
                best_val = obj_row[j]
                best_j = j
        return best_j

    def pivot_row(self, col: int) -> Optional[int]:
        """Leaving variable: minimum RHS / a_ic over rows with a_ic > 0, earliest on ties."""
        best_i = None
        best_ratio = math.inf
        for i in range(1, self.m + 1):
            aic = self.T[i][col]
            if aic > 0:
                ratio = self.T[i][self.rhs] / aic
                if ratio < best_ratio:
                    best_ratio = ratio
                    best_i = i
        return best_i

    def pivot(self, row: int, col: int):
        piv = self.T[row][col]
        if piv == 0:
            raise ValueError(f"Zero pivot element at row {row}, column {col}")
        self.T[row] = [v / piv for v in self.T[row]]
        pivot_vals = self.T[row]
        for i in range(self.m + 1):
            if i == row:
                continue
            factor = self.T[i][col]
            if factor == 0:
                continue
            self.T[i] = [a - factor * p for a, p in zip(self.T[i], pivot_vals)]
        self.pivots.append((row, col))
        self.iterations += 1

    def solve(self, on_iteration: Optional[Callable[["Simplex"], None]] = None) -> Status:
        """Pivot until no entering column (OPTIMAL) or no leaving row (UNBOUNDED).

        on_iteration is called with the solver before every iteration, including
        the final one that detects termination. There is no iteration limit: a
        degenerate instance that cycles never returns.
        """
        while self.status is Status.ITERATING:
            if on_iteration is not None:
                on_iteration(self)
            enter_j = self.pivot_column()
            if enter_j is None:
                self.status = Status.OPTIMAL
                break
            leave_i = self.pivot_row(enter_j)
            if leave_i is None:
                self.status = Status.UNBOUNDED
                break
            self.pivot(leave_i, enter_j)
        return self.status

    def _unit_row(self, j: int) -> Optional[int]:
        # exact comparisons: 1.0 / 0.0 produced by floating pivots are not rounded
        found = None
        for i in range(self.m + 1):
            v = self.T[i][j]
            if v == 1 and i > 0 and found is None:
                found = i
            elif v != 0:
                return None
        return found

    def basis(self) -> List[Optional[int]]:
        """Column of the basic variable for each constraint row (index 0 is row 1).

        A column is basic in row i when row i holds exactly 1 and every other row,
        the objective row included, holds exactly 0. When two columns are unit in
        the same row, the leftmost one keeps it.
        """
        rows: List[Optional[int]] = [None] * self.m
        for j in range(self.n + self.m):
            i = self._unit_row(j)
            if i is not None and rows[i - 1] is None:
                rows[i - 1] = j
        return rows

    def solution(self) -> List[Num]:
        if self.status is Status.UNBOUNDED:
            raise RuntimeError("Unbounded problem has no optimal solution")
        values = [self.num(0)] * self.n
        for i, j in enumerate(self.basis(), start=1):
            if j is not None and j < self.n:
                values[j] = self.T[i][self.rhs]
        return values

    def objective_value(self) -> Num:
        if self.status is Status.UNBOUNDED:
            raise RuntimeError("Unbounded problem has no optimal value")
        return self.T[0][self.rhs]

    def has_alternate_optimum(self) -> bool:
        """A nonbasic column with zero reduced cost at the optimum means a tie of optima."""
        basic = set(self.basis())
        return any(self.T[0][j] == 0 for j in range(self.n + self.m) if j not in basic)


def solve(lp: LP, exact: bool = False,
          on_iteration: Optional[Callable[[Simplex], None]] = None) -> SimplexResult:
    tab = Simplex.from_lp(lp, exact=exact)
    tableaux: List[List[str]] = []
    path: List[List[Num]] = []

    def record(s: Simplex):
        tableaux.append(s.format_tableau())
        path.append(s.solution())
        if on_iteration is not None:
            on_iteration(s)

    status = tab.solve(on_iteration=record)
    if status is Status.UNBOUNDED:
        return SimplexResult(status="unbounded", optimal_value=None, solution=None,
                             iterations=tab.iterations, tableaux=tableaux,
                             pivots=tab.pivots, path=path)
    return SimplexResult(status="optimal", optimal_value=tab.objective_value(),
                         solution=tab.solution(), iterations=tab.iterations,
                         tableaux=tableaux, pivots=tab.pivots, path=path,
                         alternate_optimal=tab.has_alternate_optimum())
