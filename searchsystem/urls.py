from django.urls import path
from . import views

urlpatterns = [
    # Literal pattern -> NFA -> DFA
    path('api/build-automata/', views.build_automata, name='build_automata'),

    # Exact matching through both automata
    path('api/simulate/', views.simulate, name='simulate'),

    # Edit-distance search
    path('api/approximate-match/', views.approximate_match, name='approximate_match'),

    # a^n b^n recognizer
    path('api/recognize-equal-runs/', views.recognize_equal_runs_view, name='recognize_equal_runs'),
]
