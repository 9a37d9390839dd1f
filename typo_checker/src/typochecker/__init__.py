"""Front ends for the spelling engine: command line (python -m typochecker) and Flask API (python -m typochecker.web)."""
