"""Domain package - ORM models and validation schemas."""
