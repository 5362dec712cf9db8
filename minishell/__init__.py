"""Building blocks of a small shell: tokens, expansion, environment, builtins and redirections."""

__version__ = "0.1.0"