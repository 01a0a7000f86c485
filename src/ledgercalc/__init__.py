"""Multi-currency transaction total recalculation."""

__version__ = "0.1.0"


# The CLI pulls in click and the database layer; the calculation core does not
def __getattr__(name):
    if name == "main":
        from ledgercalc.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
