from apollo_codegen.logger import get_logger

__author__ = """Apollo Codegen Contributors"""
__version__ = "0.1.0"

log = get_logger("apollo_codegen")
