"""First-fit free-list allocator over a fixed-size byte arena, with a demo command."""

__version__ = "1.0.0"
__all__ = ["layout", "free_list", "main"]