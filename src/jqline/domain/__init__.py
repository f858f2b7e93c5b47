"""Domain layer: the document, shared types, protocols and exceptions."""
