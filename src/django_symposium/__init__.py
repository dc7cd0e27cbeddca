"""Conference talk submission management for Django."""
