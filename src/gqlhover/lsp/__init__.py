"""Language server exposing gqlhover over LSP."""
