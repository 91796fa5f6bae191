"""Abstract base class for all message parser implementations."""

from abc import ABC, abstractmethod
from chat_tools.models import ParsedMessage


class BaseParser(ABC):
    """Abstract base class that all parsers must inherit from.

    Defines the interface for extracting tool invocations from chat text.

    Example:
        class MyParser(BaseParser):
            @property
            def name(self) -> str:
                return "my-parser"

            def parse(self, text: str) -> ParsedMessage:
                # Implementation here
                pass
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this parser.

        Recorded on every ParsedMessage and used in logging.
        """
        pass

    @abstractmethod
    def parse(self, text: str) -> ParsedMessage:
        """Parse text and extract tool invocations.

        Args:
            text: Raw chat message text to parse

        Returns:
            ParsedMessage holding the original text and ordered invocations
        """
        pass

    def parse_multiple(self, texts: list[str]) -> list[ParsedMessage]:
        """Parse multiple texts in batch."""
        return [self.parse(text) for text in texts]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
