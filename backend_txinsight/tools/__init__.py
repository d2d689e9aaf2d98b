"""Command-line tools for Backend TxInsight."""
