from __future__ import annotations

from _infra import Reconnecting, banner

from fusing import fuse


def main() -> None:
    banner("01_quickstart: fuse a misbehaving iterator")

    raw = Reconnecting(["page-1", "page-2"], after_reconnect=["stale-page"])
    pages = fuse(raw)

    print(f"first pass:  {list(pages)!r}")
    print(f"second pass: {list(pages)!r}")
    print(f"released:    {pages.released}")

    # The raw stream would have kept going
    print(f"raw stream:  {next(raw)!r}")


if __name__ == "__main__":
    main()
