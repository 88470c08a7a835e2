"""Apollo Android Java exporter module."""

from .java import translate_to_java, write_java_files
from .visitor import InputTypeVisitor, UnknownTypeError

__all__ = ["translate_to_java", "write_java_files", "InputTypeVisitor", "UnknownTypeError"]
