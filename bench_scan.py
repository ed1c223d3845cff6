# This source code is licensed under the license found in the
# LICENSE file in the root directory of this source tree.

"""
Times full scans over the sizes in ``bench.sizes``.

    python bench_scan.py
    python bench_scan.py algorithm=zhang bench.repeat=10
"""
import logging
from time import time

import hydra
from omegaconf import OmegaConf
from tqdm import tqdm

from hilbertgen import get_scan
from zhang_hilbert.logging_utils import create_logger


def run_scan(algorithm, coord_bits, width, height):
    # consume every point
    return sum(x + y for x, y in get_scan(algorithm, coord_bits, width, height))


def bench(args):
    results = {}
    for width, height in args.bench.sizes:
        timings = []
        for _ in tqdm(range(args.bench.repeat), desc=f"{width}x{height}"):
            start_time = time()
            run_scan(args.algorithm, args.coord_bits, width, height)
            timings.append(time() - start_time)
        best = min(timings)
        results[f"{width}x{height}"] = best
        logging.info(
            f"{args.algorithm} {width}x{height}: {best * 1e3:.2f} ms, "
            f"{best * 1e9 / (width * height):.1f} ns/point"
        )
    return results


@hydra.main(config_path="config", config_name="default", version_base=None)
def main(args):
    create_logger(args.log_dir)
    logging.info(OmegaConf.to_container(args.bench, resolve=True))
    bench(args)


if __name__ == "__main__":

    main()
