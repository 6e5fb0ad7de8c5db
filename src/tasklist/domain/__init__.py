"""Domain layer: exceptions and services for users, sessions, lists and tasks."""
