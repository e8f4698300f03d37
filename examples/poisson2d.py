import sys
import time
from jacobipoisson.config import SolverConfig
from jacobipoisson.solver import make_rhs, solve, SolveState

if __name__ == '__main__':
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 128
    workers = int(sys.argv[2]) if len(sys.argv) > 2 else 4
    b = make_rhs(n, n)
    # warm up
    solve(n, n, None, b, config=SolverConfig(workers=workers, maxit=5))
    print("Warm up done")
    start = time.time()
    result = solve(n, n, None, b, config=SolverConfig(workers=workers))
    print("Total time =", time.time() - start)
    print("Converged" if result.state == SolveState.Converged else
          "Exhausted", "after", result.iterations, "iterations")
    print("Center value =", result.x[n // 2, n // 2])
