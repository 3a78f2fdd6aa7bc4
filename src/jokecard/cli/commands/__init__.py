"""CLI commands for jokecard."""
