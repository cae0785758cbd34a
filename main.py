import argparse
import logging
import random
import time
from timeit import Timer

from rich.console import Console
from rich.table import Table

from physvec.config.settings import (
    BENCHMARK_NUMBER,
    BENCHMARK_REPEAT,
    OSCILLATOR_STEP,
    OSCILLATOR_STEPS,
    TRACE_BASE_PATH,
)
from physvec.entities.vector3d import Vector3D
from physvec.simulation.harmonic_oscillator import (
    IMPLEMENTATIONS,
    HarmonicOscillatorModel,
    HarmonicOscillatorSolver,
    simulate,
)
from physvec.simulation.trace_writer import TraceWriter, TraceWriterConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)
logging.captureWarnings(True)


def oscillate(args: argparse.Namespace, console: Console):
    model = HarmonicOscillatorModel()
    logger.info("Writing traces to %s", args.output)
    table = Table(title=f"Harmonic oscillator, {args.steps} steps of {args.step} s")
    table.add_column("Implementation")
    table.add_column("Final y", justify="right")
    table.add_column("Time (ms)", justify="right")

    for name in args.implementations:
        solver = HarmonicOscillatorSolver(model, IMPLEMENTATIONS[name], step=args.step)
        writer_config = TraceWriterConfig(
            trace_name=f"harmosc-{name}", base_path=args.output, overwrite_existing=args.overwrite
        )
        start = time.perf_counter()
        with TraceWriter(writer_config) as writer:
            trace = simulate(solver, args.steps, writer)
        elapsed = (time.perf_counter() - start) * 1000
        table.add_row(name, f"{trace[-1]:.6f}" if trace else "-", f"{elapsed:.1f}")

    console.print(table)


def bench(args: argparse.Namespace, console: Console):
    table = Table(title=f"plus() on random vectors, best of {args.repeat} x {args.number}")
    table.add_column("Implementation")
    table.add_column("ns / op", justify="right")

    for name in args.implementations:
        vector_type = IMPLEMENTATIONS[name]
        dimension = 2 if name == "vector2D" else Vector3D.DIMENSION
        a = vector_type(*(random.random() for _ in range(dimension)))
        b = vector_type(*(random.random() for _ in range(dimension)))
        best = min(Timer(lambda: a.plus(b)).repeat(repeat=args.repeat, number=args.number))
        table.add_row(name, f"{best / args.number * 1e9:.0f}")

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Drive the vector implementations with simple workloads.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    osc_parser = subparsers.add_parser("oscillate", help="Simulate a harmonic oscillator and write traces.")
    osc_parser.add_argument("-s", "--steps", type=int, default=OSCILLATOR_STEPS, help="Number of steps.")
    osc_parser.add_argument("--step", type=float, default=OSCILLATOR_STEP, help="Time step in seconds.")
    osc_parser.add_argument("-o", "--output", default=TRACE_BASE_PATH, help="Directory for the traces.")
    osc_parser.add_argument("--overwrite", action="store_true", help="Overwrite existing traces.")

    bench_parser = subparsers.add_parser("bench", help="Time vector addition per implementation.")
    bench_parser.add_argument("-n", "--number", type=int, default=BENCHMARK_NUMBER, help="Calls per repeat.")
    bench_parser.add_argument("-r", "--repeat", type=int, default=BENCHMARK_REPEAT, help="Number of repeats.")

    for sub in (osc_parser, bench_parser):
        sub.add_argument(
            "-i",
            "--implementations",
            nargs="+",
            choices=list(IMPLEMENTATIONS),
            default=list(IMPLEMENTATIONS),
            help="Vector implementations to run.",
        )

    args = parser.parse_args()
    console = Console()
    if args.command == "oscillate":
        oscillate(args, console)
    else:
        bench(args, console)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
