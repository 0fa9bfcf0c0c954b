"""
Color Life - Entry Point

Usage:
    python -m color_life [--width N] [--height N] [--generations N]
                         [--input PATH|-] [--output PREFIX] [options]

Examples:
    python -m color_life
    python -m color_life --width 128 --height 128 --generations 200
    python -m color_life --input seed.png --output frames/life_
    cat seed.png | python -m color_life --input - --generations 50
    python -m color_life --engine classic --seed-type blinker --width 5 --height 5

Frames are written as PREFIX0000.png, PREFIX0001.png, ...
"""

import argparse
import sys

from .config import load_config
from .errors import ColorLifeError, ConfigError
from .simulator import ColorLifeSimulator


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="color_life",
        description="Continuous-color Game of Life frame generator",
        epilog="Frames are written as PREFIX0000.png, PREFIX0001.png, ...",
    )
    p.add_argument("--width", type=int, default=64, help="Seed grid width (default 64)")
    p.add_argument("--height", type=int, default=64, help="Seed grid height (default 64)")
    p.add_argument("--generations", "-n", type=int, default=100,
                   help="Frames to write, generation 0 included (default 100)")
    p.add_argument("--clamp-min", type=float, default=0.0, help="Lower channel bound")
    p.add_argument("--clamp-max", type=float, default=1.0, help="Upper channel bound")
    p.add_argument("--threshold", type=float, default=0.25,
                   help="Input pixels with color length below this become black")
    p.add_argument("--density", type=float, default=0.5,
                   help="Lit-cell probability for the random seed (default 0.5)")
    p.add_argument("--engine", choices=["color", "classic"], default="color")
    p.add_argument("--seed-type", choices=["random", "blinker"], default="random",
                   help="Seed used when no input image is given")
    p.add_argument("--input", "-i", default=None,
                   help="Input image path, or '-' to read from stdin")
    p.add_argument("--output", "-o", default="output/", help="Output path prefix")
    p.add_argument("--rng-seed", type=int, default=None, help="Seed for reproducible runs")
    p.add_argument("--quiet", "-q", action="store_true", help="No progress output")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(
            width=args.width,
            height=args.height,
            generations=args.generations,
            clamp_min=args.clamp_min,
            clamp_max=args.clamp_max,
            threshold=args.threshold,
            density=args.density,
            engine=args.engine,
            seed_type=args.seed_type,
            input=args.input,
            output_prefix=args.output,
            rng_seed=args.rng_seed,
            quiet=args.quiet,
        )
    except ConfigError as e:
        print(f"[CL] configuration error: {e}", file=sys.stderr)
        return 2

    try:
        ColorLifeSimulator(config).run()
    except ColorLifeError as e:
        print(f"[CL] error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
