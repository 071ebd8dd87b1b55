"""Allow running the solver with `python -m alphametic`."""

from alphametic import main

# Guard against re-running in worker processes, which import the main module
if __name__ == "__main__":
    main()
