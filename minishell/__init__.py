"""Parts of a small bash-like shell: environment, expansion, tokenizer, commands, builtins and redirections."""

__version__ = "0.1.0"