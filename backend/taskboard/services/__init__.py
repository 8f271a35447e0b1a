"""Service layer for users, boards, and tasks."""
