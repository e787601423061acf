class BinarySearchTreeError(Exception):
    """
    Base exception for errors raised by the binary search tree engine.
    """
    pass


class InvalidArgumentError(BinarySearchTreeError, ValueError):
    """
    Custom exception raised when a tree operation receives an argument it cannot act on,
    such as a level index below 1.
    """
    def __init__(self, argument_name, argument_value, reason):
        self.argument_name = argument_name
        self.argument_value = argument_value
        self.reason = reason
        message = f"Invalid value for {argument_name}: {argument_value!r} ({reason})"
        super().__init__(message)
