"""Text messaging between processes over SIGUSR1 and SIGUSR2, with printf, string and character helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "client", "printf", "protocol", "server", "textutils"]