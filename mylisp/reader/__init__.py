from mylisp.reader.parser import parse, parse_atom, Reader

__all__ = ["parse", "parse_atom", "Reader"]
