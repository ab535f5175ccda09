# src/scripts/plot_ant.py
import argparse
import os
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from langton_ant import utils
from langton_ant.palette import generate_palette
from langton_ant.render import save_frame


def main():
    parser = argparse.ArgumentParser(description="Plot a saved Langton's Ant .npz")
    parser.add_argument("file", nargs="?", default="results/langton.npz", help="Path to .npz file")
    parser.add_argument("--out", default=None, help="Output image path (PNG)")
    parser.add_argument("--dpi", type=int, default=150, help="DPI for output file (default: 150)")
    args = parser.parse_args()

    if not os.path.exists(args.file):
        print(f"Error: file not found: {args.file}")
        return

    if args.out is None:
        args.out = str(Path(args.file).with_suffix(".png"))

    result = utils.load_result(args.file)
    meta = result.ensure_meta()
    palette = meta.get("palette")
    if palette is None:
        # older exports without a palette: pick fresh colours
        palette = generate_palette(int(result.cells.max()) + 1 if result.cells.max() >= 0 else 1)

    save_frame(result, palette, args.out, dpi=args.dpi)


if __name__ == "__main__":
    main()
