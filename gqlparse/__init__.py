"""Parser for GraphQL query documents and schema definition language."""

__version__ = "0.1.0"
__all__ = ["ast", "blockstring", "lexer", "parsing", "query", "schema"]