"""Output layer: dice renderers and ServiceResult formatting."""
