"""Infrastructure adapters: logging, settings and ledger stores."""
