from .do_callbacks import PacePolicy, do_callbacks, do_callbacks_writer, do_callbacksM

__all__ = (
    # Policies
    "PacePolicy",
    # LazyCoroResult
    "do_callbacks",
    # LazyCoroResultWriter
    "do_callbacks_writer",
    # Generic
    "do_callbacksM",
)
