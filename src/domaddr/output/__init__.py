"""Output layer: turns ServiceResult into Rich text, quiet lines, or JSON."""
