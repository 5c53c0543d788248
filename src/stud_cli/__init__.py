"""stud: Jira and git workflow helper."""

__version__ = "1.0.0"
