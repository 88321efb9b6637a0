from menukeys.compilation.artifact import EncodingStats

__all__ = ["EncodingStats"]
