from __future__ import annotations

from _infra import Window, banner

from fusing import FusePolicy, fuse, probe
from kungfu import Error, Ok, Result


def budget(limit: int):
    def step(total: int, cost: int) -> Result[int, str]:
        if total + cost > limit:
            return Error(f"over budget at {cost}")
        return Ok(total + cost)

    return step


def main() -> None:
    banner("02_try_fold_probe: short-circuiting folds and call tracing")

    target = probe(Window([3, 4, 5, 6]))
    costs = fuse(target, policy=FusePolicy.checked())

    match costs.try_fold(0, budget(10)):
        case Ok(total):
            print(f"total: {total}")
        case Error(reason):
            print(f"stopped: {reason}")

    # Stopping early still hands the window over
    print(f"released: {costs.released}, size_hint: {costs.size_hint()}")
    print(f"calls seen by the window: {target.log.ops()!r}")


if __name__ == "__main__":
    main()
