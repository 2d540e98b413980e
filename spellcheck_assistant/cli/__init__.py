from spellcheck_assistant.cli.cli import CLI, main

__all__ = ["CLI", "main"]
