"""Status codes and the exceptions raised for invalid input, storage and configuration failures.

- Status / STATUS_MESSAGE / get_message: codes and their user-facing messages
- BaseStatusException and its subclasses, e.g. AmountInvalidException
"""
