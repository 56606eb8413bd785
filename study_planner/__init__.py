"""Study planner backend: user-scoped todos, schedule, assignments and quick tasks."""
