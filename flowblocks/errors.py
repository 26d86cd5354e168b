"""Errors raised by blocks while they process messages."""


class BlockError(Exception):
    """A block failed while executing."""