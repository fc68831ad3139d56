import argparse
import os
import sys
from multiprocessing import cpu_count

from rich import print
from rich.markup import escape
from rich.table import Table

from .batch import compute_many
from .config import Parameters
from .light import Illuminant
from .tcs import N_TCS, NAMES
from .util import exit_with_error, init_logging


def load_sources(args):
    sources = []
    for name in args.illuminant:
        try:
            sources.append((name, Illuminant.standard(name)))
        except KeyError:
            exit_with_error(f"unknown illuminant {name!r}")
    for path in args.csv:
        try:
            sources.append((os.path.basename(path), Illuminant.from_csv(path, delimiter=args.delimiter)))
        except (OSError, ValueError) as e:
            exit_with_error(f"could not read {path}: {e}")
    return sources


def build_table(label, cri):
    table = Table(title=escape(label))
    table.add_column("sample", justify="right")
    table.add_column("description")
    table.add_column("Ri", justify="right")
    for i in range(N_TCS):
        style = "red" if cri[i] < 0 else None
        table.add_row(f"R{i + 1}", NAMES[i], f"{cri[i]:.1f}", style=style)
    return table


def plot(results):
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    width = 0.8 / len(results)
    for k, (label, cri) in enumerate(results):
        ax.bar([i + k * width for i in range(N_TCS)], list(cri), width=width, label=label)
    ax.set_xticks([i + 0.4 - width / 2 for i in range(N_TCS)])
    ax.set_xticklabels([f"R{i + 1}" for i in range(N_TCS)])
    ax.axhline(0, color="black", linewidth=0.5)
    ax.set_ylabel("special colour rendering index")
    ax.legend()
    plt.show()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="cri",
        description="CIE 13.3 colour rendering index calculator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--illuminant",
        action="append",
        default=[],
        help="a CIE standard illuminant by name, e.g. FL3.1 or D65. May be repeated.",
    )
    parser.add_argument(
        "--csv",
        action="append",
        default=[],
        help="a measured spectrum: two columns, wavelength in nm and spectral power. May be repeated.",
    )
    parser.add_argument("--delimiter", default=",", help="column delimiter of the --csv files")
    parser.add_argument(
        "--workers",
        type=int,
        help="the number of processes used concurrently. defaults to cpu_count - 1",
        default=max(cpu_count() - 1, 1),
    )
    parser.add_argument("--cct-min", type=float, default=1000.0, help="lower bound of the CCT search, in kelvin")
    parser.add_argument("--cct-max", type=float, default=100000.0, help="upper bound of the CCT search, in kelvin")
    parser.add_argument(
        "--max-duv",
        type=float,
        default=0.05,
        help="the largest distance from the Planckian locus for which a CCT is reported",
    )
    parser.add_argument("--plot", action="store_true", help="plot the indices using matplotlib")
    parser.add_argument("--verbose", action="store_true", help="log the intermediate steps")

    args = parser.parse_args(argv)
    init_logging(args.verbose)

    try:
        parameters = Parameters.from_args(args)
    except ValueError as e:
        exit_with_error(str(e))

    sources = load_sources(args)
    if not sources:
        exit_with_error("No light sources given! Use --illuminant or --csv.")

    outcomes = compute_many(
        [illuminant for _, illuminant in sources],
        workers=min(args.workers, len(sources)),
        parameters=parameters,
    )

    results = []
    failed = False
    for (label, _), outcome in zip(sources, outcomes):
        if not outcome.ok:
            failed = True
            print(f"[bold red]{escape(label)}:[/bold red] {escape(str(outcome.error))}")
            continue
        cct = outcome.value.cct
        print(f"[bold]{escape(label)}[/bold]: CCT {cct.t:.0f} K, Duv {cct.duv:+.4f}, {outcome.value.reference} reference")
        print(build_table(label, outcome.value))
        results.append((label, outcome.value))

    if args.plot and results:
        plot(results)

    return 1 if failed else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nProcess interrupted. Shutting down...")
        try:
            sys.exit(130)
        except SystemExit:
            os._exit(130)
