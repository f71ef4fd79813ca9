#!/usr/bin/env python3
"""
Trial launcher for the reference-actor connectivity analysis.

Runs the analysis module once per trial, sequentially, each with its own
random seed and output directory:

    {outdir}/trial_{k:03d}/KevinSpecialOrNot.txt
    {outdir}/trial_{k:03d}/peers.csv
    {outdir}/trial_{k:03d}/report_costar.md

Seeds are base_seed, base_seed + 1, ... so a set of trials is reproducible.
"""

import argparse
import subprocess
import sys
import datetime
from pathlib import Path


def run_step(description: str, command: list[str]):
    """Run one trial, print status, and stop on error."""
    print("\n" + "=" * 80)
    print(f"[{datetime.datetime.now().isoformat()}] 🚀 Starting: {description}")
    print("=" * 80)
    print(" ".join(command))
    print("-" * 80)

    try:
        result = subprocess.run(command, check=True)
        print(f"\n✅ Completed: {description}\n")
        return result.returncode
    except subprocess.CalledProcessError as e:
        print(f"\n❌ ERROR in {description}")
        print(f"Command failed with return code {e.returncode}")
        sys.exit(e.returncode)


def build_commands(args: argparse.Namespace) -> list[tuple[str, list[str]]]:
    outdir = Path(args.outdir).resolve()
    steps = []
    for k in range(args.trials):
        seed = args.base_seed + k
        cmd = [
            sys.executable,
            "-m",
            "costar.analysis.analyse",
            "--input",
            str(Path(args.input).resolve()),
            "--outdir",
            str(outdir / f"trial_{k:03d}"),
            "--random-state",
            str(seed),
        ]
        if args.reference_node is not None:
            cmd += ["--reference-node", str(args.reference_node)]
        if args.baseline is not None:
            cmd += ["--baseline", str(args.baseline)]
        if args.validation:
            cmd.append("--validation")
        steps.append((f"Trial {k + 1}/{args.trials} (seed {seed})", cmd))
    return steps


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run repeated co-star comparison trials.")
    parser.add_argument("--input", required=True, help="Adjacency text file.")
    parser.add_argument("--outdir", default="data/trials", help="Parent directory for per-trial outputs.")
    parser.add_argument("--trials", type=int, default=1, help="Number of trials to run.")
    parser.add_argument("--base-seed", type=int, default=0, help="Seed of the first trial.")
    parser.add_argument("--reference-node", help="Reference actor ID passed to every trial.")
    parser.add_argument("--baseline", help="Baseline passed to every trial ('a/b' or decimal).")
    parser.add_argument("--validation", action="store_true", help="Enable statistical validation per trial.")
    args = parser.parse_args(argv)

    if args.trials < 1:
        parser.error("--trials must be at least 1")

    print("\n" + "#" * 80)
    print("#               CO-STAR COMPARISON TRIAL LAUNCHER")
    print("#" * 80)

    for desc, cmd in build_commands(args):
        run_step(desc, cmd)

    print(f"\n🎉 All {args.trials} trials completed successfully!\n")


if __name__ == "__main__":
    main()
