"""Solve a random or file-loaded TSP instance from the command line."""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from tsp.services.distmat import DistanceMatrix
from tsp.services.naming import MAX_NAMED_CITIES, city_name
from tsp.services.problem import Options, Problem
from tsp.services.solver import solve


class Command(BaseCommand):
    help = (
        "Solve a TSP instance exactly. Use --verbosity 2 to print every complete "
        "tour and --verbosity 3 to also trace every partial path."
    )

    def add_arguments(self, parser):
        source = parser.add_mutually_exclusive_group(required=True)
        source.add_argument(
            "-n", "--size", type=int, help="generate a random matrix with this many cities"
        )
        source.add_argument("-l", "--load", metavar="FILENAME", help="load a distance matrix")
        parser.add_argument("-f", "--first", type=int, default=0, help="first city [default: 0]")
        parser.add_argument("-s", "--seed", type=int, default=0, help="random seed [default: 0]")
        parser.add_argument(
            "--distmax",
            type=int,
            default=None,
            help="largest random distance [default: TSP_DISTMAX setting]",
        )
        parser.add_argument(
            "-o", "--optimize", action="store_true", help="enable branch-and-bound pruning"
        )
        parser.add_argument(
            "--expect",
            type=int,
            metavar="DIST",
            help="fail unless the optimal distance equals DIST",
        )

    def handle(self, *args, **options):
        matrix = self._build_matrix(options)
        size = matrix.size
        first = options["first"]

        if not 2 <= size <= MAX_NAMED_CITIES:
            raise CommandError(f"Problem size must be in [2, {MAX_NAMED_CITIES}], got {size}")
        if not 0 <= first < size:
            raise CommandError(f"First city must be in [0, {size}), got {first}")

        problem = Problem.for_matrix(
            matrix,
            first=first,
            options=Options.from_verbosity(options["verbosity"], options["optimize"]),
        )

        banner = f"TSP problem of size {size} starting from city {city_name(first)}"
        if options["size"] is not None:
            banner += f" (seed {options['seed']})"
        self.stdout.write(banner + ".")
        self.stdout.write(matrix.render())
        self.stdout.write("Starting path exploration...")

        result = solve(problem, out=self.stdout)

        self.stdout.write(
            f"TSP solved after {result.count} paths fully explored "
            f"over {result.explored_total}."
        )
        self.stdout.write(result.path.render())

        expected = options["expect"]
        if expected is not None:
            self.stdout.write(f"tsp dist: {result.distance} (expected: {expected})")
            if result.distance != expected:
                raise CommandError(
                    f"Optimal distance {result.distance} differs from expected {expected}"
                )

    def _build_matrix(self, options) -> DistanceMatrix:
        if options["load"]:
            try:
                return DistanceMatrix.load(options["load"])
            except OSError as exc:
                raise CommandError(f"Cannot read {options['load']}: {exc}") from exc
            except ValueError as exc:
                raise CommandError(f"Invalid matrix file {options['load']}: {exc}") from exc

        size = options["size"]
        if size < 2:
            raise CommandError(f"Problem size must be in [2, {MAX_NAMED_CITIES}], got {size}")
        distmax = options["distmax"]
        if distmax is None:
            distmax = settings.TSP_DISTMAX
        try:
            return DistanceMatrix.random(size, seed=options["seed"], distmax=distmax)
        except ValueError as exc:
            raise CommandError(str(exc)) from exc
