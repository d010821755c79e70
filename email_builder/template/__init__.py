"""Template — schema + parser."""
from .schema import EmailTemplate
from .parser import dump_document, dump_template, export_filename, load_document, parse_template

__all__ = [
    "EmailTemplate",
    "load_document",
    "parse_template",
    "dump_document",
    "dump_template",
    "export_filename",
]
