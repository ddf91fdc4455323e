from django.apps import AppConfig


class TspConfig(AppConfig):
    name = "tsp"
    verbose_name = "TSP solver"
