from django.urls import path

from tsp.views.matrix import random_matrix
from tsp.views.solve import solve_tour

urlpatterns = [
    path("solve", solve_tour),
    path("matrix/random", random_matrix),
]
