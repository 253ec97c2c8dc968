"""HTTP (frontend.web) and command-line (python -m frontend) front ends for the search engine."""
