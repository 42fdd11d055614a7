"""finledger - a personal income and expense ledger."""
