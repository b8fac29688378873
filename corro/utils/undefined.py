"""Sentinel for a value that is absent rather than explicitly ``None``."""


class _Undefined:
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def is_missing(value) -> bool:
    """True for ``None`` and ``UNDEFINED``."""
    return value is None or value is UNDEFINED
