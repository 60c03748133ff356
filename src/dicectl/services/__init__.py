"""Service layer: composes the domain pipeline behind ServiceResult."""
