#!/usr/bin/env python3
"""
Benchmark: measure render time and PNG size across positions and board sizes.

Run before and after touching the renderers to check that a change did not
slow down the hot path. Pillow's bundled font is used so the numbers do not
depend on which font files happen to be installed.

Usage: python3 tools/bench.py [repeats]
"""
import os
import sys
import time

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from diagram import FontSet, render_diagram

# Fixed positions so results stay comparable between runs.
POSITIONS = [
    ("Empty",        "8/8/8/8/8/8/8/8 w - - 0 1"),
    ("Start",        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"),
    ("Mid-open",     "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"),
    ("Complex mid",  "r2q1rk1/ppp2ppp/2np1n2/2b1p1B1/2B1P1b1/2NP1N2/PPP2PPP/R2Q1RK1 w - - 0 8"),
    ("Kings",        "4k3/8/8/8/8/8/8/4K3 w - - 0 1"),
]

SIZES = [200, 800, 2000]


def run_position(label: str, fen: str, size: int, fonts: FontSet, repeats: int) -> dict:
    """Render one position repeatedly and return timing metrics.

    Args:
        label: Human-readable position name for display.
        fen: FEN string to render.
        size: Board edge in pixels.
        fonts: Fonts shared by every render.
        repeats: Number of renders to average over.

    Returns:
        Dict with keys: label, size, bytes, avg_ms, best_ms.
    """
    timings = []
    png = b""
    for _ in range(repeats):
        start = time.perf_counter()
        png = render_diagram(fen, False, size, fonts)
        timings.append((time.perf_counter() - start) * 1000)

    return {
        "label": label,
        "size": size,
        "bytes": len(png),
        "avg_ms": sum(timings) / len(timings),
        "best_ms": min(timings),
    }


def main() -> None:
    """Run all benchmark renders and print a summary table."""
    repeats = int(sys.argv[1]) if len(sys.argv) > 1 else 5
    fonts = FontSet.builtin()

    print(f"FEN diagram render benchmark - {sys.executable}")
    print(f"Repeats per row: {repeats}")
    print()
    print(f"{'Position':<14} {'Size':>5} {'Bytes':>9} {'Avg(ms)':>9} {'Best(ms)':>9}")
    print("-" * 50)

    results = []
    for label, fen in POSITIONS:
        for size in SIZES:
            r = run_position(label, fen, size, fonts, repeats)
            results.append(r)
            print(
                f"{r['label']:<14} {r['size']:>5} {r['bytes']:>9,} "
                f"{r['avg_ms']:>9.1f} {r['best_ms']:>9.1f}"
            )

    print("-" * 50)
    for size in SIZES:
        rows = [r for r in results if r["size"] == size]
        avg = sum(r["avg_ms"] for r in rows) / len(rows)
        print(f"{'AVERAGE':<14} {size:>5} {'':>9} {avg:>9.1f}")


if __name__ == "__main__":
    main()
