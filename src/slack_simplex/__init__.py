from .simplex import LP, Simplex, SimplexResult, Status, solve

__all__ = ["LP", "Simplex", "SimplexResult", "Status", "solve"]
