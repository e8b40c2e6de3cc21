"""Test data factories for deterministic test data generation."""
