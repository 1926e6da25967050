"""Output layer — renders ServiceResult values as plain text lines."""
