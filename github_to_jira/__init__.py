"""Import GitHub backport pull requests into Jira."""

__version__ = "0.1.0"
