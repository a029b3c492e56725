from .cli import CommandRunner, main, render_tree

__all__ = ["CommandRunner", "main", "render_tree"]
