"""In-memory task service with a REST interface."""
