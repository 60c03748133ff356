"""Pure domain layer: notation parsing, roll evaluation, session history."""
