from .table_file import read_table_file, render_tables, split_lines

__all__ = ["read_table_file", "render_tables", "split_lines"]
