# spellcheck_assistant/utils - config, logging and metrics helpers
