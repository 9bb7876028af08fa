"""Bytecode builder error classes.

Every error aborts the build; no partially encoded payload is ever returned.
"""


class BytecodeBuilderError(Exception):
    """Base error for bytecode building."""

    pass


class PreconditionError(BytecodeBuilderError):
    """Inputs violate a caller-enforced precondition."""

    pass


class MisalignedTemplatesError(PreconditionError):
    """Number of call templates differs from the number of route legs."""

    pass


class EmptyRouteError(PreconditionError):
    """Price route has no best route or the best route has no legs."""

    pass


class MissingWrapTemplateError(PreconditionError):
    """A native-source leg needs wrapping but no deposit call was supplied."""

    pass


class CallDataEncodingError(BytecodeBuilderError):
    """A call template is incompatible with the executor encoding."""

    pass


class PatternNotFoundError(CallDataEncodingError):
    """Expected token address or amount word is absent from the call data."""

    pass


class HeaderOverflowError(BytecodeBuilderError):
    """A value does not fit in its fixed-width header field."""

    pass


class UnsupportedExecutorError(BytecodeBuilderError):
    """No builder is registered for the requested executor version."""

    pass
