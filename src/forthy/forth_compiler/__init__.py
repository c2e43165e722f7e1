from .compiler import ForthCompiler, forth_compile
