# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Generates a pseudo-Hilbert curve and draws it, as ASCII art or with matplotlib.

    python hilbertgen.py width=6 height=7
    python hilbertgen.py width=40 height=7 algorithm=zhang format=png
"""
import logging

import hydra
from omegaconf import OmegaConf

from zhang_hilbert.logging_utils import create_logger
from zhang_hilbert.render import render_ascii, save_curve_figure
from zhang_hilbert.scan import (
    ArbHilbertScan32,
    ArbHilbertScan64,
    HilbertScan32,
    HilbertScan64,
)

SCANS = {
    ("zhang", 32): HilbertScan32,
    ("zhang", 64): HilbertScan64,
    ("zhang-arb", 32): ArbHilbertScan32,
    ("zhang-arb", 64): ArbHilbertScan64,
}


def get_scan(algorithm, coord_bits, width, height):
    if (algorithm, coord_bits) not in SCANS:
        raise ValueError(f"algorithm {algorithm} with {coord_bits}-bit coordinates doesn't match")
    return SCANS[(algorithm, coord_bits)](width, height)


def generate(args):
    scan = get_scan(args.algorithm, args.coord_bits, args.width, args.height)
    logging.info(f"{type(scan).__name__}: {args.width}x{args.height}, {len(scan)} points")
    points = scan.to_array()

    if args.format == "ascii":
        return "\n".join(render_ascii(points.tolist(), args.width, args.height))
    elif args.format == "png":
        path = save_curve_figure(
            points, args.width, args.height, args.output, title=args.algorithm
        )
        logging.info(f"saved to {path}")
        return path
    elif args.format == "show":
        import matplotlib.pyplot as plt
        from zhang_hilbert.render import draw_curve

        fig = plt.figure(figsize=(8, 5))
        draw_curve(fig.add_subplot(1, 1, 1), points)
        plt.show()
        return None
    else:
        raise ValueError(f"format {args.format} doesn't match")


@hydra.main(config_path="config", config_name="default", version_base=None)
def main(args):
    create_logger(args.log_dir)
    logging.info(OmegaConf.to_container(args, resolve=True))
    out = generate(args)
    if args.format == "ascii":
        print(out)


if __name__ == "__main__":

    main()
