"""Service layer — parse/format engine, range validation, and the value field."""
