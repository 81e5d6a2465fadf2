# stackmeta/utils/string_finder.py

class StringFinder:
    """Forward-only cursor that splits a string on successive delimiters."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def to(self, pos: int) -> None:
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def next(self, delimiter: str) -> str:
        """
        Returns the text up to the next `delimiter` and moves past it.
        If the delimiter is missing, returns everything that is left.
        """
        if self.at_end():
            return ""

        end = self.text.find(delimiter, self.pos) if delimiter else -1
        if end == -1:
            end = len(self.text)

        chunk = self.text[self.pos:end]
        self.pos = end + len(delimiter)
        return chunk
