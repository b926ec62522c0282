"""Interface web FastAPI : tableau des films et page de reglages."""
