"""Exceptions raised by slpsims.

Everything subclasses ValueError, so callers that only care about bad input
can catch that.
"""


class GroupError(ValueError):
    pass


class MalformedPermutation(GroupError):
    pass


class OutOfDomain(GroupError):
    def __init__(self, message, point=None):
        super().__init__(message)
        self.point = point


class UnmappedGenerator(GroupError):
    def __init__(self, message, generator=None):
        super().__init__(message)
        self.generator = generator


class NotInOrbit(GroupError):
    pass
