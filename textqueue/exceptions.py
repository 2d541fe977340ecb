class QueueError(Exception):
    """Base class for text queue errors."""


class CorruptQueueError(QueueError):
    """A queue's head/tail/size bookkeeping does not match its node chain."""
