"""Command implementations for the swaggervars CLI."""
