"""In-memory fakes used across the test suite."""
