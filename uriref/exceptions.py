from __future__ import annotations


class UriError(ValueError):
    pass


class MalformedPercentSequenceError(UriError):
    """
    Percent-encoded text could not be decoded: a ``%`` was not followed by two
    hex digits, or the escaped bytes were not a valid UTF-8 sequence.
    """

    @classmethod
    def from_text(cls, text: str, reason: str) -> MalformedPercentSequenceError:
        return cls("{0}: {1!r}".format(reason, text))


class InvalidComponentError(UriError):
    @classmethod
    def from_component(
        cls, name: str, value: object, msg: str
    ) -> InvalidComponentError:
        return cls("{0} {1}: {2!r}".format(name, msg, value))
