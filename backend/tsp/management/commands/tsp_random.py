"""Generate a random distance matrix, print it and optionally save it."""
import time

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from tsp.services.distmat import DistanceMatrix
from tsp.services.naming import MAX_NAMED_CITIES


class Command(BaseCommand):
    help = "Generate a random symmetric distance matrix."

    def add_arguments(self, parser):
        parser.add_argument(
            "size", nargs="?", type=int, default=5, help="number of cities [default: 5]"
        )
        parser.add_argument("filename", nargs="?", help="save the matrix to this file")
        parser.add_argument(
            "seed", nargs="?", type=int, default=None, help="random seed [default: current time]"
        )
        parser.add_argument(
            "--distmax",
            type=int,
            default=None,
            help="largest distance [default: TSP_DISTMAX setting]",
        )

    def handle(self, *args, **options):
        size = options["size"]
        if not 2 <= size <= MAX_NAMED_CITIES:
            raise CommandError(f"Matrix size must be in [2, {MAX_NAMED_CITIES}], got {size}")

        seed = options["seed"] if options["seed"] is not None else int(time.time())
        distmax = options["distmax"]
        if distmax is None:
            distmax = settings.TSP_DISTMAX
        try:
            matrix = DistanceMatrix.random(size, seed=seed, distmax=distmax)
        except ValueError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(matrix.render())

        filename = options["filename"]
        if filename:
            try:
                matrix.save(filename)
            except OSError as exc:
                raise CommandError(f"Cannot write {filename}: {exc}") from exc
            self.stdout.write(f"Saved {size}x{size} matrix (seed {seed}) to {filename}.")
