"""Application layer: ports, ledger session and use cases."""
