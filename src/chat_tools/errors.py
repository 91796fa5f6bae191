"""Failure taxonomy for tool handlers.

Handlers raise these internally and convert them to display strings with
``to_result()`` before returning, so nothing escapes the executor.
"""


class ToolError(Exception):
    """Base class for every handler failure."""

    def to_result(self) -> str:
        return f"Error: {self}"


class UnknownToolError(ToolError):
    """No alias matches the requested tool name."""

    def __init__(self, tool: str):
        super().__init__(tool)
        self.tool = tool

    def to_result(self) -> str:
        return f"Unknown tool: {self.tool}"


class CalculatorSyntaxError(ToolError):
    """Expression could not be tokenized or parsed."""

    def to_result(self) -> str:
        return "Error: Invalid expression"


class CalculatorNumericError(ToolError):
    """Expression evaluated to NaN or an infinite value."""

    def to_result(self) -> str:
        return "Error: Invalid calculation"


class InvalidURLError(ToolError):
    def to_result(self) -> str:
        return "Error: Invalid URL format"


class UnsupportedSchemeError(ToolError):
    def __init__(self, scheme: str):
        super().__init__(scheme)
        self.scheme = scheme

    def to_result(self) -> str:
        return "Error: Only HTTP and HTTPS URLs are supported"


class FetchHTTPError(ToolError):
    """The relay answered with a non-success status."""

    def __init__(self, status_code: int):
        super().__init__(status_code)
        self.status_code = status_code

    def to_result(self) -> str:
        return f"Error: Failed to fetch webpage (Status: {self.status_code})"


class FetchError(ToolError):
    """Network, decoding or envelope failure while fetching a page."""

    def to_result(self) -> str:
        return f"Error: Unable to fetch webpage - {self}"
