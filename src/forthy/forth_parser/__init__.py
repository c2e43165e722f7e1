from .lexer import ForthLexer, forth_lex
